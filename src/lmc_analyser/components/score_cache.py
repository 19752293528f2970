"""
Кэш оценок ответов.

Ключ — (id ответа, отпечаток текста, epsilon). Оценка — чистая функция
от текста и epsilon, поэтому записи не меняются после сохранения.
Доступ защищён блокировкой, кэш можно разделять между потоками.
"""

import hashlib
import threading
from typing import Dict, Optional, Tuple

from ..interfaces.analysis import ResponseScore, ScoreCacheInterface


def content_fingerprint(text: str) -> str:
    """SHA-256 текста ответа."""
    return hashlib.sha256((text or '').encode('utf-8')).hexdigest()


class ScoreCache(ScoreCacheInterface):
    """Потокобезопасный кэш ResponseScore в памяти."""

    def __init__(self):
        self._entries: Dict[Tuple[str, str, float], ResponseScore] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    @staticmethod
    def make_key(response_id: str, text: str, epsilon: float) -> Tuple[str, str, float]:
        return (response_id, content_fingerprint(text), float(epsilon))

    def get(self, response_id: str, text: str, epsilon: float) -> Optional[ResponseScore]:
        key = self.make_key(response_id, text, epsilon)
        with self._lock:
            score = self._entries.get(key)
            if score is None:
                self._misses += 1
            else:
                self._hits += 1
        return score

    def put(self, response_id: str, text: str, epsilon: float, score: ResponseScore) -> None:
        key = self.make_key(response_id, text, epsilon)
        with self._lock:
            self._entries.setdefault(key, score)

    def clear(self) -> None:
        """Очищает записи и счётчики."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0

    def stats(self) -> Dict[str, int]:
        """Возвращает статистику: попадания, промахи, количество записей."""
        with self._lock:
            return {
                'hits': self._hits,
                'misses': self._misses,
                'entries': len(self._entries),
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
