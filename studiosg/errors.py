"""
Иерархия ошибок графа сцены.

Все ошибки наследуются от SceneGraphError, а также от «родного»
python‑исключения, чтобы `except KeyError` и т.п. тоже работали.
"""


class SceneGraphError(Exception):
    """Базовая ошибка графа сцены."""


class NotFound(SceneGraphError, KeyError):
    """Нет дочернего узла (или параметра бекенда) с таким именем."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class DuplicateName(SceneGraphError, ValueError):
    """Имя уже занято другим узлом у того же родителя."""


class TypeMismatch(SceneGraphError, TypeError):
    """Типизированное чтение значения другого вида."""


class UnknownType(SceneGraphError, KeyError):
    """Тег типа не зарегистрирован в реестре."""

    def __str__(self):
        return str(self.args[0]) if self.args else ""


class BackendRejected(SceneGraphError, RuntimeError):
    """Бекенд отклонил вызов (неизвестный/освобождённый handle)."""


class CycleError(SceneGraphError, ValueError):
    """Попытка сделать узел собственным потомком."""


class RegistryFrozen(SceneGraphError, RuntimeError):
    """Регистрация типа после инициализации реестра."""


class ImportFailed(SceneGraphError):
    """Импортёр не смог построить под‑граф из файла."""


class FrameInFlight(SceneGraphError, RuntimeError):
    """Граф нельзя коммитить, пока предыдущий кадр не завершён."""
