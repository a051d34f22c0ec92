from dormitory.services.export.csv_export_service import CsvExportService, export_filename, render_csv
from dormitory.services.export.csv_import_service import CsvImportService, parse_csv

__all__ = ["CsvExportService", "CsvImportService", "export_filename", "parse_csv", "render_csv"]
