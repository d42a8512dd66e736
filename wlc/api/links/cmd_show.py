"""Links show API command.

CLI: wlc links show
"""

from collections.abc import Iterator

from ..config.WLCConfig import WLCConfig
from ..StageResult import StageResult
from ..vault.Vault import Vault
from . import LinksShowOutput
from ._constants import PREVIEW_LIMIT
from .load_broken_links import load_broken_links
from .RegistryNotFoundError import RegistryNotFoundError


def cmd_show(limit: int = PREVIEW_LIMIT) -> StageResult:
    """Show the broken links currently listed in the broken links file.

    Args:
        limit: Number of keys to preview
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        registry_path = ""

        def finish(message: str, success: bool, errors: list[str], keys: list[str] | None = None) -> None:
            keys = keys or []
            result_obj.result = message
            result_obj.output = LinksShowOutput(
                errors=errors,
                warnings=[],
                registry_path=registry_path,
                count=len(keys),
                preview=keys[:limit],
                truncated=len(keys) > limit,
            ).model_dump(mode="python")
            result_obj.success = success

        yield (0.2, "Loading configuration...")
        try:
            config = WLCConfig.load()
        except ValueError as e:
            finish(f"Failed to load config: {e}", False, [str(e)])
            return
        registry_path = config.links.broken_links_file

        yield (0.5, f"Reading {registry_path}...")
        try:
            with Vault(config.vault) as vault:
                keys = load_broken_links(vault, registry_path)
        except RegistryNotFoundError as e:
            finish(str(e), False, [str(e)])
            return
        except Exception as e:
            finish(f"Failed to read broken links: {e}", False, [str(e)])
            return

        if not keys:
            finish(f"No broken links detected in: {registry_path}", True, [])
        else:
            more = "\n..." if len(keys) > limit else ""
            finish(f"Detected {len(keys)} broken links:\n" + "\n".join(keys[:limit]) + more, True, [], keys)
        yield (1.0, "Complete")

    return StageResult(
        announce="Loading detected broken links...",
        progress_callback=do_work,
    )
