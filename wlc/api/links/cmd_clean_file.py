"""Links clean-file API command.

CLI: wlc links clean-file <path>
"""

import logging
from collections.abc import Iterator

from ..config.WLCConfig import WLCConfig
from ..log.append_log import append_log
from ..StageResult import StageResult
from ..vault.Vault import Vault
from . import LinksCleanFileOutput
from ._constants import LOG_DOMAIN
from .clean_document import clean_document
from .cmd_clean import NO_KEYS_MESSAGE
from .links_pass_guard import links_pass_guard
from .load_broken_links import load_broken_links
from .RegistryNotFoundError import RegistryNotFoundError

logger = logging.getLogger(__name__)


def cmd_clean_file(path: str) -> StageResult:
    """Clean the broken links listed in the broken links file from one document.

    Args:
        path: Document path, relative to the vault root or absolute
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        registry_path = ""
        delete_text = False

        def finish(
            message: str,
            success: bool,
            errors: list[str],
            keys_loaded: int = 0,
            changed: bool = False,
            document_path: str = path,
        ) -> None:
            result_obj.result = message
            result_obj.output = LinksCleanFileOutput(
                errors=errors,
                warnings=[],
                registry_path=registry_path,
                keys_loaded=keys_loaded,
                delete_text=delete_text,
                path=document_path,
                changed=changed,
            ).model_dump(mode="python")
            result_obj.success = success

        yield (0.1, "Loading configuration...")
        try:
            config = WLCConfig.load()
        except ValueError as e:
            finish(f"Failed to load config: {e}", False, [str(e)])
            return
        registry_path = config.links.broken_links_file
        delete_text = config.links.delete_text
        log_path = WLCConfig.get_logfile_path()

        try:
            with links_pass_guard(WLCConfig.get_home_dir()), Vault(config.vault) as vault:
                document = vault.document_for(path)
                if document is None:
                    finish(f"No such document in vault: {path}", False, [f"No such document in vault: {path}"])
                    return

                yield (0.3, f"Loading broken links from {registry_path}...")
                try:
                    keys = set(load_broken_links(vault, registry_path))
                except RegistryNotFoundError as e:
                    finish(str(e), False, [str(e)])
                    return
                if not keys:
                    finish(NO_KEYS_MESSAGE, False, [NO_KEYS_MESSAGE])
                    return

                yield (0.6, f"Loaded {len(keys)} broken links. Cleaning {document.name}...")
                failed: list[str] = []
                changed = clean_document(vault, document, keys, delete_text, log_path, failed)
        except Exception as e:
            logger.exception("Broken link cleanup of %s failed", path)
            append_log(log_path, LOG_DOMAIN, "ERROR", f"Clean of {path} failed: {e}")
            finish(f"Broken link cleanup failed: {e}", False, [str(e)])
            return

        if failed:
            finish(f"Could not clean {document.name}", False, [f"Could not read or write {document.path}"], len(keys))
            return

        if changed:
            message = f"Cleaned broken links from: {document.name}"
            append_log(log_path, LOG_DOMAIN, "INFO", message)
        else:
            message = f"No broken links found in: {document.name}"
        finish(message, True, [], len(keys), changed, document.path)
        yield (1.0, "Complete")

    return StageResult(
        announce=f"Cleaning broken links from {path}...",
        progress_callback=do_work,
    )
