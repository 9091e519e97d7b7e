"""Failures of the record creation pipeline.

Each stage raises one of these; the API layer renders them as
``{"error": message}`` with ``status_code``. Messages are part of the
public contract and stay in Spanish.
"""

from __future__ import annotations

# HTTP statuses that forbid a response body
BODILESS_STATUSES = frozenset({204, 205, 304})


class RecordCreationError(Exception):
    """Base class for every failure that ends a create request."""

    status_code: int = 500
    default_message: str = "Error interno del servidor"

    def __init__(self, message: str | None = None, *, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class IOReadError(RecordCreationError):
    status_code = 400
    default_message = "No se pudo leer el cuerpo de la solicitud"


class InvalidPayloadError(RecordCreationError):
    status_code = 400
    default_message = "Formato JSON inválido"


class MissingFieldError(RecordCreationError):
    status_code = 400

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Falta el campo: {field}")


class SerializationError(RecordCreationError):
    default_message = "Error al preparar la consulta"


class UpstreamUnreachableError(RecordCreationError):
    default_message = "Error al conectar con el servicio de consulta"


class UpstreamStatusError(RecordCreationError):
    """The query service answered with a non-success status; relayed as-is.

    Statuses that cannot carry a body are answered with 500 instead.
    """

    default_message = "Error al crear el registro del paciente"

    def __init__(self, upstream_status: int):
        self.upstream_status = upstream_status
        status_code = upstream_status
        if upstream_status < 200 or upstream_status in BODILESS_STATUSES:
            status_code = 500
        super().__init__(status_code=status_code)


class ResponseDecodeError(RecordCreationError):
    default_message = "Error al procesar la respuesta del servicio de consulta"


class MissingResultDataError(RecordCreationError):
    default_message = "La respuesta del servicio de consulta no contiene datos"


class MalformedRowError(RecordCreationError):
    default_message = "La fila devuelta por el servicio de consulta es inválida"


class MissingIdentifierError(RecordCreationError):
    default_message = "La respuesta del servicio de consulta no contiene el id"
