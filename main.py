import argparse
import asyncio
import mimetypes
import sys
import time
from pathlib import Path

from nanoedit.bootstrap.bootstrapper import bootstrap_session
from nanoedit.components.configuration.configuration_interface import (
    ConfigurationInterface,
)
from nanoedit.dependencies.components import get_components
from nanoedit.entities.presets import PRESETS, find_preset
from nanoedit.entities.session_state import Error, Success
from nanoedit.services.EditSession.edit_session_interface import EditSessionInterface
from nanoedit.services.ImageCodec.image_codec import decode


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    preset_names = ", ".join(preset["label"] for preset in PRESETS)
    parser = argparse.ArgumentParser(
        description="Edit an image with a natural-language instruction."
    )
    parser.add_argument("image", type=Path, help="Path to the source image")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--prompt", help="Describe the edit to apply")
    group.add_argument("--preset", help=f"Use a preset instruction ({preset_names})")
    parser.add_argument("--output", type=Path, help="Where to write the edited image")
    parser.add_argument("--env", default="development")
    return parser.parse_args(argv)


def resolve_instruction(args: argparse.Namespace) -> str:
    if args.preset is None:
        return args.prompt

    preset = find_preset(args.preset)
    if preset is None:
        raise SystemExit(f"Unknown preset: {args.preset}")
    return preset["text"]


def default_output_path(
    configuration: ConfigurationInterface, media_type: str = "image/png"
) -> Path:
    output_dir = configuration.get_configuration("OUTPUT_DIR", str, default=".")
    prefix = configuration.get_configuration("OUTPUT_PREFIX", str, default="gemini-edit")
    suffix = mimetypes.guess_extension(media_type) or ".png"
    return Path(output_dir) / f"{prefix}-{int(time.time() * 1000)}{suffix}"


async def run(
    session: EditSessionInterface, image_path: Path, instruction: str
) -> int:
    media_type, _ = mimetypes.guess_type(image_path.name)
    if not media_type or not media_type.startswith("image/"):
        print("Please upload a valid image file", file=sys.stderr)
        return 1

    session.select_image(image_path.read_bytes(), media_type)
    session.set_instruction(instruction)

    state = await session.generate()
    if isinstance(state, Error):
        print(state.message, file=sys.stderr)
        return 1
    if not isinstance(state, Success):
        print("Nothing to generate: select an image and describe the edit.", file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    instruction = resolve_instruction(args)

    session = bootstrap_session(env=args.env)
    configuration = get_components(env=args.env).get_component(ConfigurationInterface)

    exit_code = asyncio.run(run(session, args.image, instruction))
    state = session.current_state()
    if exit_code or not isinstance(state, Success):
        return exit_code

    result = state.result
    if result.image is not None:
        output_path = args.output or default_output_path(
            configuration, result.image.media_type
        )
        output_path.write_bytes(decode(result.image))
        print(f"Saved edited image to {output_path}")
    if result.text:
        print(result.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
