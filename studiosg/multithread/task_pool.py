# studiosg/multithread/task_pool.py
# ---------------------------------------------------------------
# Простой пул задач на основе concurrent.futures.
# Бекенд рендерит кадр в пуле, а граф сцены в это время не трогают:
# ожидание кадра всегда явное (Frame.wait_for_frame).
# ---------------------------------------------------------------

from concurrent.futures import ThreadPoolExecutor
import threading

class TaskPool:
    """Пул готового количества потоков; задачи принимаются как callables."""
    def __init__(self, max_workers=None):
        self.executor = ThreadPoolExecutor(max_workers=max_workers)
        # только незавершённые задачи: завершённые убирает done‑callback
        self.tasks = set()
        self._lock = threading.Lock()
        self._shutdown = False

    def submit(self, fn, *args, **kwargs):
        """Отправить задачу в пул, вернуть Future."""
        if self._shutdown:
            raise RuntimeError("TaskPool already shut down")
        future = self.executor.submit(fn, *args, **kwargs)
        with self._lock:
            self.tasks.add(future)
        future.add_done_callback(self._forget)
        return future

    def _forget(self, future):
        with self._lock:
            self.tasks.discard(future)

    def wait_all(self):
        """Блокировать до завершения всех поставленных задач."""
        with self._lock:
            futures = list(self.tasks)
        for future in futures:
            if not future.cancelled():
                future.result()  # пробрасывает исключения, если они возникли

    def shutdown(self, wait=True):
        self._shutdown = True
        self.executor.shutdown(wait=wait)
