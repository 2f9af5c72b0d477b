from __future__ import annotations

from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication
from loguru import logger

from app.viewmodels.main_vm import ExhibitVM
from app.views.main_window import MainWindow, next_tick
from core.services.collection_service import CollectionBuilder
from core.services.interfaces import NormalizeOptions
from infrastructure.image_service import ImageService
from infrastructure.json_repository import JsonDatasetRepository
from infrastructure.logging import init_logging
from infrastructure.settings import JsonSettings


BASE_DIR = Path(__file__).parent


def _parse_normalize_options(settings: JsonSettings) -> NormalizeOptions:
    defaults = NormalizeOptions()
    return NormalizeOptions(
        local_prefix=settings.get_str("images.local_prefix", defaults.local_prefix),
        url_prefix=settings.get_str("images.url_prefix", defaults.url_prefix),
        origin_location_type=settings.get_str(
            "catalog.origin_location_type", defaults.origin_location_type
        ),
        bce_suffix=settings.get_str("display.bce_suffix", defaults.bce_suffix),
        ce_suffix=settings.get_str("display.ce_suffix", defaults.ce_suffix),
        thousands_separator=settings.get_str(
            "display.thousands_separator", defaults.thousands_separator
        ),
    )


def build_vm(settings: JsonSettings) -> ExhibitVM:
    """Load the dataset, build the collection once and wrap it in the view-model."""
    dataset_path = settings.resolve_path("dataset.path", "samples/small-dataset.json")
    options = _parse_normalize_options(settings)

    raw = list(JsonDatasetRepository().load(dataset_path))
    report = CollectionBuilder(options).build_with_report(raw)
    logger.info(
        "Built collection: {} of {} records kept",
        len(report.objects),
        len(raw),
    )
    for reason, count in report.count_by_reason().items():
        logger.info("Dropped {} record(s): {}", count, reason.value)
    if not report.objects:
        logger.warning("Collection is empty; the gallery will be empty")

    return ExhibitVM(
        report.objects,
        schedule=next_tick,
        preselect_first=settings.get_bool("selection.preselect_first", False),
        technique_limit=settings.get_int("display.technique_limit", 4),
    )


def main() -> int:
    settings = JsonSettings(BASE_DIR / "settings.json")
    log_dir = settings.get("logging.directory")
    log_path = init_logging(
        log_dir if isinstance(log_dir, str) and log_dir else None,
        level=settings.get_str("logging.level", "INFO"),
    )

    app = QApplication(sys.argv)

    try:
        vm = build_vm(settings)
    except (OSError, ValueError) as ex:
        logger.exception("Failed to load dataset: {}", ex)
        return 1

    img = ImageService(settings, base_dir=BASE_DIR)
    win = MainWindow(vm=vm, image_service=img, settings=settings, log_dir=str(log_path))
    win.statusBar().showMessage("Ready", 2000)
    win.show()

    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
