"""
Session-scoped todo list.

The whole list lives in the server-side session under two keys: ``todos`` holds the
items in ascending id order and ``index`` holds the id counter. A request loads
a full snapshot, mutates it and writes the full snapshot back; there is no
locking, so two concurrent requests on the same session can lose an update.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Dict, List, MutableMapping
import logging

from .errors import NotFound

logger = logging.getLogger(__name__)

TODOS_KEY = "todos"
INDEX_KEY = "index"

SEED_CONTENT = "A faire"


@dataclass
class TodoItem:
    id: int
    content: str
    done: bool = False


class SortFilter(Enum):
    ALL = "all"
    DONE = "done"
    NOT_DONE = "not done"

    @classmethod
    def parse(cls, value: str) -> "SortFilter":
        """Map a submitted ``sort`` value to a filter.

        Only ``all`` and ``done`` are recognised; every other string,
        including typos, selects ``NOT_DONE``.
        """
        if value == cls.ALL.value:
            return cls.ALL
        if value == cls.DONE.value:
            return cls.DONE
        return cls.NOT_DONE

    def matches(self, item: TodoItem) -> bool:
        if self is SortFilter.ALL:
            return True
        if self is SortFilter.DONE:
            return item.done
        return not item.done


@dataclass
class SessionState:
    """``next_id`` is the last id handed out; the next create receives ``next_id + 1``."""

    next_id: int = 0
    todos: Dict[int, TodoItem] = field(default_factory=dict)

    @classmethod
    def seeded(cls) -> "SessionState":
        return cls(next_id=0, todos={0: TodoItem(id=0, content=SEED_CONTENT)})

    @classmethod
    def from_session(cls, session: MutableMapping) -> "SessionState":
        todos = {}
        for raw in session[TODOS_KEY]:
            item = TodoItem(id=int(raw["id"]), content=raw["content"], done=bool(raw["done"]))
            todos[item.id] = item
        return cls(next_id=int(session[INDEX_KEY]), todos=todos)

    def save(self, session: MutableMapping):
        session[TODOS_KEY] = [asdict(item) for item in self.items()]
        session[INDEX_KEY] = self.next_id

    def items(self) -> List[TodoItem]:
        return [self.todos[todo_id] for todo_id in sorted(self.todos)]

    def filtered(self, sort: SortFilter) -> List[TodoItem]:
        return [item for item in self.items() if sort.matches(item)]

    def get(self, todo_id: int) -> TodoItem:
        try:
            return self.todos[todo_id]
        except KeyError:
            logger.warning(f"Todo {todo_id} not found")
            raise NotFound()

    def create(self, content: str) -> TodoItem:
        # The seed owns id 0 without advancing the counter, so allocation starts at 1
        self.next_id += 1
        item = TodoItem(id=self.next_id, content=content)
        self.todos[item.id] = item
        return item

    def toggle(self, todo_id: int) -> TodoItem:
        item = self.get(todo_id)
        item.done = not item.done
        return item

    def delete(self, todo_id: int) -> TodoItem:
        item = self.get(todo_id)
        del self.todos[todo_id]
        return item


def load(session: MutableMapping) -> SessionState:
    """Return the session's todo list, seeding it on first access."""
    if session.get(INDEX_KEY) is None:
        logger.debug("Seeding todo list for new session")
        state = SessionState.seeded()
        state.save(session)
        return state
    return SessionState.from_session(session)
