class AdminActionError(Exception):
    """Базовая ошибка действия оператора; текст уходит в уведомление"""


class FetchFailure(AdminActionError):
    pass


class MutationFailure(AdminActionError):
    pass


class RecordNotFound(MutationFailure):
    pass


class ValidationFailure(AdminActionError, ValueError):
    pass
