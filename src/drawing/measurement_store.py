"""
Measurement Store - Ordered in-memory history of completed measurements
"""

from PySide6.QtCore import QObject, Signal


class MeasurementStore(QObject):
    """Keeps completed measurements in the order they were made

    History lives only in memory; nothing is persisted.
    """

    history_changed = Signal(int)  # New number of stored measurements

    def __init__(self):
        super().__init__()
        self._records = []

    def append(self, record):
        self._records.append(record)
        self.history_changed.emit(len(self._records))

    def remove_last(self):
        """Remove and return the newest measurement, or None when empty"""
        if not self._records:
            return None
        record = self._records.pop()
        self.history_changed.emit(len(self._records))
        return record

    def all(self):
        """Read-only ordered view of the history"""
        return tuple(self._records)

    def last(self):
        return self._records[-1] if self._records else None

    def clear(self):
        had_records = bool(self._records)
        self._records.clear()
        if had_records:
            self.history_changed.emit(0)

    def __len__(self):
        return len(self._records)

    def __iter__(self):
        return iter(tuple(self._records))
