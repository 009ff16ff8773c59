from .file_exporter import FileExporter, ReportExportError

__all__ = ['FileExporter', 'ReportExportError']
