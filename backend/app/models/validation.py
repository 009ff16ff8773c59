from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional, Union


class DiscrepancyModel(BaseModel):
    registro: str
    expected_fields: int
    occurrences: int
    sample_line_numbers: List[int] = Field(default_factory=list, max_length=5)
    sample_texts: List[str] = Field(default_factory=list, max_length=3)


class FileReportModel(BaseModel):
    """Reporte de validación de un archivo SPED"""
    total_unique_blocks: int
    block_occurrences: Dict[str, int]
    missing_blocks: List[str]
    field_count_discrepancies: List[DiscrepancyModel]
    error: Optional[Dict[str, Any]] = None


class FileErrorModel(BaseModel):
    erro: str


class AggregateModel(BaseModel):
    total_files: int
    files_with_missing_blocks: int
    files_with_discrepancies: int
    files_with_errors: int = 0
    unique_missing_blocks: List[str]


class ArchiveValidationResponse(BaseModel):
    """Resumen agregado más el detalle por archivo extraído"""
    aggregate: AggregateModel
    per_file: Dict[str, Union[FileReportModel, FileErrorModel]]
