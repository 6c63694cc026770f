"""
Таймер игрового цикла.

Один слот: в каждый момент ожидает не больше одного callback.
Время в миллисекундах, по умолчанию часы pygame.
"""
import pygame


class Timer:
    """Отменяемый таймер с одним слотом"""

    def __init__(self, clock=None):
        self.clock = clock or pygame.time.get_ticks
        self._deadline = None
        self._callback = None

    @property
    def pending(self):
        return self._callback is not None

    def start(self, delay_ms, callback):
        """Запланировать callback через delay_ms (заменяет ожидающий)"""
        self._deadline = self.clock() + delay_ms
        self._callback = callback

    def cancel(self):
        self._deadline = None
        self._callback = None

    def poll(self):
        """
        Вызвать callback, если срок наступил.
        Слот освобождается до вызова, поэтому callback может запланировать себя снова.
        """
        if self._callback is None or self.clock() < self._deadline:
            return False

        callback = self._callback
        self.cancel()
        callback()
        return True
