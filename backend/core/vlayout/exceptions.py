from typing import Optional


def os_error_reason(error: OSError) -> str:
    """Motivo de un OSError sin la ruta del servidor."""
    return error.strerror or type(error).__name__


class LayoutValidationError(Exception):
    """Error base para todos los errores del validador de layout."""

    code = "LAYOUT_VALIDATION_ERROR"

    def __init__(self, message: str, detail: Optional[str] = None):
        self.message = message
        self.detail = detail
        context = f" ({detail})" if detail else ""
        super().__init__(f"{message}{context}")

    def to_dict(self) -> dict:
        payload = {"erro": self.message}
        if self.detail:
            payload["detalhes"] = self.detail
        return payload


class SchemaLoadError(LayoutValidationError):
    """El layout no existe, no se puede leer o no es JSON válido."""

    code = "SCHEMA_LOAD_ERROR"

    def __init__(self,
                 message: str,
                 path: Optional[str] = None,
                 detail: Optional[str] = None,
                 not_found: bool = False):
        self.path = path
        self.not_found = not_found
        super().__init__(message, detail)

    def to_dict(self) -> dict:
        payload = super().to_dict()
        # caminho sólo en 'no encontrado'
        if self.path and self.not_found:
            payload["caminho"] = self.path
        return payload


class NoFileSupplied(LayoutValidationError):
    """La petición no trae el archivo esperado."""

    code = "NO_FILE_SUPPLIED"

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Archivo no enviado en el campo '{field_name}'")


class UnsupportedArchiveFormat(LayoutValidationError):
    """Contenedor distinto de .zip o .rar."""

    code = "UNSUPPORTED_ARCHIVE_FORMAT"

    def __init__(self, filename: Optional[str] = None):
        self.filename = filename
        super().__init__("Formato no soportado. Use .zip o .rar", filename)


class ArchiveExtractionFailure(LayoutValidationError):
    """Error al extraer el archivo comprimido."""

    code = "ARCHIVE_EXTRACTION_FAILURE"

    def __init__(self, detail: str, message: str = "Fallo al procesar el archivo comprimido"):
        super().__init__(message, detail)


class ArchiveLimitExceeded(ArchiveExtractionFailure):
    """El archivo comprimido supera los límites de extracción configurados."""

    code = "ARCHIVE_LIMIT_EXCEEDED"

    def __init__(self, detail: str):
        super().__init__(detail, message="El archivo comprimido supera los límites permitidos")


class NoDataFilesFound(LayoutValidationError):
    """La extracción terminó pero no hay archivos de datos."""

    code = "NO_DATA_FILES_FOUND"

    def __init__(self, suffix: str = ".txt"):
        self.suffix = suffix
        super().__init__(f"Ningún {suffix} encontrado dentro del archivo comprimido")


class PerFileValidationError(LayoutValidationError):
    """Error aislado a un archivo dentro de un lote."""

    code = "PER_FILE_VALIDATION_ERROR"

    def __init__(self, message: str, path: Optional[str] = None, code: Optional[str] = None):
        self.path = path
        if code:
            self.code = code
        super().__init__(message)
