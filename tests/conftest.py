"""
Настройка pytest и общие фикстуры
"""
import io
import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

# Корень проекта в sys.path для импортов в тестах
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from config.messages import MESSAGES
from console.interpreter import CommandInterpreter
from core.models import Record
from services.record_service import RecordService
from utils.i18n import ENGLISH, Translator


class InMemoryRecordRepository:
    """Хранилище в памяти, ведущее себя как таблица entities"""

    def __init__(self):
        self.rows: Dict[int, str] = {}
        self._next_id = 1

    def find_all(self) -> List[Record]:
        return [Record(record_id, name) for record_id, name in self.rows.items()]

    def find_by_id(self, record_id: int) -> Optional[Record]:
        if record_id not in self.rows:
            return None
        return Record(record_id, self.rows[record_id])

    def insert(self, name: str) -> int:
        self.rows[self._next_id] = name
        self._next_id += 1
        return 1

    def update(self, record_id: int, name: str) -> int:
        if record_id not in self.rows:
            return 0
        self.rows[record_id] = name
        return 1

    def delete(self, record_id: int) -> int:
        return 1 if self.rows.pop(record_id, None) is not None else 0


@pytest.fixture
def repository():
    return InMemoryRecordRepository()


@pytest.fixture
def service(repository):
    return RecordService(repository)


@pytest.fixture
def translator():
    return Translator(MESSAGES, fallback=ENGLISH)


@pytest.fixture
def interpreter(service, translator):
    """Интерпретатор на английском с хранилищем в памяти"""
    return CommandInterpreter(service, translator, ENGLISH, stdin=io.StringIO(), stdout=io.StringIO())


@pytest.fixture
def en(translator):
    """Английское сообщение в том виде, в каком его выводит интерпретатор"""
    def render(key, *args):
        return translator.translate(key, args, ENGLISH)
    return render
