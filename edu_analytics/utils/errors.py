# edu_analytics/utils/errors.py


class DomainError(Exception):
    """Error de dominio con el status HTTP que le corresponde en la API."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(DomainError):
    status_code = 404


class EmptyResultError(DomainError):
    # agregado sobre cero valores (media de notas/progreso sin datos)
    status_code = 404


class InvalidPayloadError(DomainError):
    status_code = 400


class InvalidInstructorError(InvalidPayloadError):
    pass
