"""
In-memory stand-ins for the parts of the Firestore client the functions use:
collections and sub-collections, simple where() queries, document
update/delete, and write batches.
"""

import copy
import operator

import pytest
from google.api_core.exceptions import NotFound, ServiceUnavailable

OPERATORS = {
    "<": operator.lt,
    "<=": operator.le,
    "==": operator.eq,
    ">": operator.gt,
    ">=": operator.ge,
}


def apply_update(document, data):
    """Apply an update, treating dotted keys as nested field paths."""
    for key, value in data.items():
        *parents, leaf = str(key).split(".")
        target = document
        for parent in parents:
            if not isinstance(target.get(parent), dict):
                target[parent] = {}
            target = target[parent]
        target[leaf] = value


class FakeDocumentSnapshot:
    def __init__(self, reference, data):
        self.reference = reference
        self.id = reference.id
        self._data = data

    @property
    def exists(self):
        return self._data is not None

    def to_dict(self):
        return dict(self._data) if self._data is not None else None


class FakeDocumentReference:
    def __init__(self, db, path):
        self._db = db
        self.path = path
        self.id = path.rsplit("/", 1)[-1]

    def get(self):
        return FakeDocumentSnapshot(self, self._db.docs.get(self.path))

    def update(self, data):
        if self._db.fail_writes:
            raise ServiceUnavailable("Firestore unavailable")
        if self.path not in self._db.docs:
            raise NotFound(f"No document to update: {self.path}")
        self._db.writes.append(("update", self.path, data))
        apply_update(self._db.docs[self.path], data)

    def delete(self):
        if self._db.fail_writes:
            raise ServiceUnavailable("Firestore unavailable")
        self._db.writes.append(("delete", self.path, None))
        self._db.docs.pop(self.path, None)

    def collection(self, name):
        return FakeCollectionReference(self._db, f"{self.path}/{name}")


class FakeQuery:
    def __init__(self, db, path, filters=()):
        self._db = db
        self._path = path
        self._filters = list(filters)

    def where(self, field, op, value):
        return FakeQuery(self._db, self._path, self._filters + [(field, op, value)])

    def _matches(self, data):
        for field, op, value in self._filters:
            if field not in data or not OPERATORS[op](data[field], value):
                return False
        return True

    def stream(self):
        if self._path in self._db.fail_reads:
            raise ServiceUnavailable("Firestore unavailable")
        for path, data in sorted(self._db.docs.items()):
            if path.rsplit("/", 1)[0] == self._path and self._matches(data):
                yield FakeDocumentSnapshot(FakeDocumentReference(self._db, path), data)


class FakeCollectionReference(FakeQuery):
    def document(self, document_id):
        return FakeDocumentReference(self._db, f"{self._path}/{document_id}")


class FakeWriteBatch:
    def __init__(self, db):
        self._db = db
        self._ops = []

    def update(self, reference, data):
        self._ops.append(("update", reference, data))

    def delete(self, reference):
        self._ops.append(("delete", reference, None))

    def commit(self):
        if self._db.fail_commits or (
            self._db.commit_budget is not None
            and len(self._db.commits) >= self._db.commit_budget
        ):
            raise ServiceUnavailable("Firestore unavailable")
        self._db.commits.append(len(self._ops))
        for op, reference, data in self._ops:
            if op == "update":
                apply_update(self._db.docs[reference.path], data)
            else:
                self._db.docs.pop(reference.path, None)
            self._db.writes.append((op, reference.path, data))


class FakeFirestore:
    def __init__(self):
        self.docs = {}
        self.writes = []
        self.commits = []
        self.fail_reads = set()
        self.fail_writes = False
        self.fail_commits = False
        # Number of commits allowed to succeed before the rest fail
        self.commit_budget = None

    def add(self, path, data):
        self.docs[path] = copy.deepcopy(data)
        return FakeDocumentReference(self, path)

    def collection(self, name):
        return FakeCollectionReference(self, name)

    def batch(self):
        return FakeWriteBatch(self)


@pytest.fixture
def db():
    return FakeFirestore()
