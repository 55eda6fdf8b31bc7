"""Path translation tool backed by the environment volume mappings."""

from typing import Any

from fastmcp import FastMCP

from wslpath.contracts import build_ok, build_translation_data
from wslpath.errors import TranslationError
from wslpath.formatting import build_translation_error
from wslpath.translator import get_translator, source_for
from wslpath.utils import AbsoluteOutput, AllowRootfs, PathText, TargetFormat, parse_format


def register(mcp: FastMCP) -> None:
    """Register wsl_translate_path tool with the MCP server."""

    @mcp.tool()
    def wsl_translate_path(
        path: PathText,
        target: TargetFormat = "auto",
        allow_rootfs: AllowRootfs = True,
        absolute: AbsoluteOutput = False,
    ) -> dict[str, Any]:
        """Translate a path between Windows and WSL (Unix) formats.

        Drive letters map through <LETTER>_VOLUME_PATH variables, UNC shares
        through WSL_UNC_PATH. Unix paths outside every mapped volume fall
        back to WSL_ROOTFS_PATH (read-only from Windows!) unless
        allow_rootfs is false.

        Related tools:
        - wsl_clean_path: Normalize a path without changing its format
        - wsl_list_mappings: Show the volume mappings in effect
        """
        translator = get_translator()
        wanted = parse_format(target)
        try:
            if wanted is None:
                result = translator.translate_auto(path, allow_rootfs, absolute)
            else:
                result = translator.translate(source_for(wanted), wanted, path, allow_rootfs, absolute)
        except TranslationError as exc:
            return build_translation_error(exc, path=path)

        return build_ok(
            build_translation_data(
                input=path,
                output=result.path,
                source_format=result.source.value,
                target_format=result.target.value,
                rootfs_fallback=result.rootfs_fallback,
            )
        )
