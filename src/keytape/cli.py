"""
CLI entry point for keytape

  keytape keylog.json demo.mp4
  keytape keylog.json demo.mp4 --key-normalization=icon --highlight-color=FFCC66
  KEYTAPE_FONT_SIZE=40 keytape keylog.json demo.mp4 --no-burn
"""
import argparse
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from keytape.config.settings import (
    OPTION_HANDLERS,
    KeytapeConfig,
    config_from_sources,
    env_name,
    load_env_file,
    template_values,
)
from keytape.pipeline.processors import ass, media
from keytape.pipeline.processors.keys import normalize_events
from keytape.schema import load_keylog
from keytape.utils.logger import debug, error, info, setup_logging, success


def output_paths(video_path: Path, output: Optional[Path] = None) -> tuple[Path, Path]:
    """
    根据 video_path 确定输出路径。

    规则：
    - 字幕：与视频同目录同名，后缀 .ass（videos/demo.mp4 → videos/demo.ass）
    - 视频：videos/demo.mp4 → videos/demo-captioned.mp4（可用 --output 覆盖）
    """
    ass_path = video_path.with_suffix(".ass")
    out_video = output or video_path.with_name(f"{video_path.stem}-captioned.mp4")
    return ass_path, out_video


def run_one(
    keylog_path: Path,
    video_path: Path,
    config: KeytapeConfig,
    *,
    output: Optional[Path] = None,
    burn: bool = True,
) -> Dict[str, str]:
    """对单个视频生成字幕并烧录。返回产物路径。"""
    if not video_path.exists():
        raise FileNotFoundError(f"Video file not found: {video_path}")

    ass_path, out_video = output_paths(video_path, output)

    # 1. 读取并校验 keylog
    events = load_keylog(keylog_path)
    debug(f"Loaded {len(events)} key events from {keylog_path}")

    # 2. 归一化按键
    events = normalize_events(events, config.key_normalization)

    # 3. 生成 ASS
    res_x, res_y = media.probe_video_dims(str(video_path))
    debug(f"Video dimensions: {res_x}x{res_y}")
    result = ass.run(events, config, res_x=res_x, res_y=res_y, output_path=ass_path)
    info(f"Generated: {ass_path} ({result.metrics['windows']} windows)")

    outputs = {"ass": str(ass_path)}
    if not burn:
        return outputs

    # 4. 烧录
    media.run(str(video_path), ass_path=str(ass_path), output_path=str(out_video))
    success(f"Done. Saved captioned video to: {out_video}")
    outputs["video"] = str(out_video)
    return outputs


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keytape",
        description="Render a keylog as on-screen key captions and burn them into a video",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Every style option can also be set through the environment,
e.g. --font-size=40 or {env_name("font-size")}=40 (flags win).
A .env file in the current directory or above is loaded first.
        """,
    )
    parser.add_argument("keylog", type=Path, help="Keylog JSON file ([{\"ms\": ..., \"key\": ...}, ...])")
    parser.add_argument("video", type=Path, help="Recorded video file")

    defaults = template_values(KeytapeConfig(), res_x=0, res_y=0)
    style = parser.add_argument_group("style options")
    for option, (field_name, _) in OPTION_HANDLERS.items():
        style.add_argument(
            f"--{option}",
            dest=field_name,
            metavar="VALUE",
            help=f"default: {defaults[field_name]}",
        )

    parser.add_argument("--output", type=Path, help="Output video path (default: <video>-captioned.mp4)")
    parser.add_argument("--no-burn", action="store_true", help="Only write the .ass file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def cli_options(args: argparse.Namespace) -> Dict[str, str]:
    """从 argparse 结果中取出用户显式传入的选项（flag 名 → 原始字符串）。"""
    options = {}
    for option, (field_name, _) in OPTION_HANDLERS.items():
        value = getattr(args, field_name, None)
        if value is not None:
            options[option] = value
    return options


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    load_env_file()

    try:
        config = config_from_sources(os.environ, cli_options(args))
        run_one(
            args.keylog,
            args.video,
            config,
            output=args.output,
            burn=not args.no_burn,
        )
    except Exception as e:
        error(str(e))
        if args.verbose:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
