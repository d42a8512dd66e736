"""Links clean API command.

CLI: wlc links clean
"""

import logging
from collections.abc import Iterator

from ..config.WLCConfig import WLCConfig
from ..log.append_log import append_log
from ..StageResult import StageResult
from ..vault.Vault import Vault
from . import LinksCleanOutput
from ._constants import LOG_DOMAIN
from .clean_document import clean_document
from .links_pass_guard import links_pass_guard
from .load_broken_links import load_broken_links
from .RegistryNotFoundError import RegistryNotFoundError

logger = logging.getLogger(__name__)

NO_KEYS_MESSAGE = "No broken links loaded. Check your broken links file."


def cmd_clean() -> StageResult:
    """Clean the broken links listed in the broken links file from every document.

    Confirmation is the caller's job; this command does not prompt.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        registry_path = ""
        delete_text = False

        def finish(message: str, success: bool, errors: list[str], keys_loaded: int = 0) -> None:
            result_obj.result = message
            result_obj.output = LinksCleanOutput(
                errors=errors,
                warnings=[],
                registry_path=registry_path,
                keys_loaded=keys_loaded,
                delete_text=delete_text,
                files_total=0,
                files_cleaned=0,
                cleaned=[],
                failed=[],
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

        cleaned: list[str] = []
        failed: list[str] = []
        try:
            with links_pass_guard(WLCConfig.get_home_dir()), Vault(config.vault) as vault:
                yield (0.2, f"Loading broken links from {registry_path}...")
                try:
                    keys = set(load_broken_links(vault, registry_path))
                except RegistryNotFoundError as e:
                    finish(str(e), False, [str(e)])
                    return
                if not keys:
                    finish(NO_KEYS_MESSAGE, False, [NO_KEYS_MESSAGE])
                    return

                registry = vault.get_document(registry_path)
                documents = [
                    document
                    for document in vault.iter_documents()
                    if registry is None or document.path != registry.path
                ]
                yield (0.3, f"Loaded {len(keys)} broken links. Cleaning {len(documents)} files...")
                for document in documents:
                    if clean_document(vault, document, keys, delete_text, log_path, failed):
                        cleaned.append(document.path)
        except Exception as e:
            logger.exception("Broken link cleanup failed")
            append_log(log_path, LOG_DOMAIN, "ERROR", f"Clean failed: {e}")
            finish(f"Broken link cleanup failed: {e}", False, [str(e)])
            return

        result_obj.result = f"Cleaned {len(cleaned)} files out of {len(documents)} total files"
        append_log(log_path, LOG_DOMAIN, "INFO", result_obj.result)
        result_obj.output = LinksCleanOutput(
            errors=[],
            warnings=[f"Could not clean {path}, left unchanged" for path in failed],
            registry_path=registry_path,
            keys_loaded=len(keys),
            delete_text=delete_text,
            files_total=len(documents),
            files_cleaned=len(cleaned),
            cleaned=cleaned,
            failed=failed,
        ).model_dump(mode="python")
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Cleaning broken links from vault...",
        progress_callback=do_work,
    )
