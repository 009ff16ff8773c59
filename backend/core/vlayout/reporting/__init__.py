# reporting/__init__.py
"""
Módulo de reporting para validación de layout.
"""

from .aggregator import BatchAggregator
from .exporters.file_exporter import FileExporter, ReportExportError
from .formatters.json_formatter import JSONFormatter
from .models import AggregateReport, BacklogReport, BatchReport, FileOutcome, outcome_to_dict

__all__ = [
    'BatchAggregator',
    'AggregateReport',
    'BatchReport',
    'BacklogReport',
    'FileOutcome',
    'outcome_to_dict',
    'JSONFormatter',
    'FileExporter',
    'ReportExportError'
]
