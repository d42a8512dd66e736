"""Version command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from .get_package_version import get_package_version


def cmd_version() -> StageResult:
    """Report the installed package version."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.5, "Reading package metadata...")
        package_version = get_package_version()
        result_obj.result = f"wlc {package_version}"
        result_obj.output = {"errors": [], "warnings": [], "version": package_version}
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(announce="Checking version...", progress_callback=do_work)
