# commands/export.py
"""Export the advocate roster (optionally one district) to CSV."""

import csv
import logging
import os
from datetime import datetime

from slugify import slugify

from directory import AdvocateDirectory
from models import AdvocateRecord
import config

log = logging.getLogger(__name__)


def run(
    advocates_path: str | None = None,
    output_dir: str | None = None,
    district: str | None = None,
) -> str:
    """Write the roster to a timestamped CSV.

    Args:
        advocates_path: Roster JSON file (defaults to config.ADVOCATES_PATH).
        output_dir: Directory for the output CSV. Falls back to config.OUTPUT_DIR.
        district: If given, export only advocates in this district.

    Returns:
        The path to the generated CSV file.
    """
    directory = AdvocateDirectory.from_file(advocates_path)
    advocates = directory.by_district(district) if district else directory.all()

    if not output_dir:
        output_dir = config.OUTPUT_DIR
    os.makedirs(output_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    scope = slugify(district) if district else "all"
    csv_path = os.path.join(output_dir, f"advocates_{scope}_{timestamp}.csv")

    with open(csv_path, "w", newline="", encoding=config.CSV_ENCODING) as f:
        writer = csv.writer(f, quoting=csv.QUOTE_ALL)
        writer.writerow(AdvocateRecord.csv_headers())
        for advocate in advocates:
            writer.writerow(advocate.to_csv_row())

    log.info("CSV exported: %s (%d advocates)", csv_path, len(advocates))
    return csv_path
