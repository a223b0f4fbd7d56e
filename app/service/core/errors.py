class StorageError(Exception):
    """
    Любая ошибка слоя хранения: нет соединения, запись отклонена, запрос упал.
    Исходное исключение драйвера доступно через __cause__.
    """
