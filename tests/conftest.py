"""
Shared fixtures: an in-memory stand-in for the Supabase client and Finnhub
article/response builders.
"""

from types import SimpleNamespace
from unittest import mock

import pytest


class FakeQuery:
    """Mimics the subset of the supabase query builder used by signalist.db."""

    def __init__(self, store, table):
        self.store = store
        self.table = table
        self.action = "select"
        self.columns = "*"
        self.payload = None
        self.filters = []
        self.order_by = None
        self.limit_to = None

    def select(self, columns="*"):
        self.action = "select"
        self.columns = columns
        return self

    def insert(self, data):
        self.action = "insert"
        self.payload = data
        return self

    def upsert(self, data):
        self.action = "upsert"
        self.payload = data
        return self

    def delete(self):
        self.action = "delete"
        return self

    def eq(self, column, value):
        self.filters.append((column, value))
        return self

    def order(self, column, desc=False):
        self.order_by = (column, desc)
        return self

    def limit(self, count):
        self.limit_to = count
        return self

    def _matches(self, row):
        return all(row.get(column) == value for column, value in self.filters)

    def execute(self):
        rows = self.store.setdefault(self.table, [])
        if self.action in ("insert", "upsert"):
            new_rows = self.payload if isinstance(self.payload, list) else [self.payload]
            if self.action == "upsert":
                ids = {row.get("id") for row in new_rows}
                rows[:] = [row for row in rows if row.get("id") not in ids]
            rows.extend(dict(row) for row in new_rows)
            return SimpleNamespace(data=new_rows)

        matched = [row for row in rows if self._matches(row)]
        if self.action == "delete":
            rows[:] = [row for row in rows if not self._matches(row)]
            return SimpleNamespace(data=matched)

        if self.order_by:
            column, desc = self.order_by
            matched = sorted(matched, key=lambda row: row.get(column) or "", reverse=desc)
        if self.limit_to is not None:
            matched = matched[: self.limit_to]
        if self.columns != "*":
            wanted = [c.strip() for c in self.columns.split(",")]
            matched = [{c: row.get(c) for c in wanted} for row in matched]
        return SimpleNamespace(data=matched)


class FakeSupabase:
    def __init__(self):
        self.tables = {}
        self.auth = mock.MagicMock()

    def table(self, name):
        return FakeQuery(self.tables, name)


@pytest.fixture
def fake_supabase(monkeypatch):
    """Routes every get_supabase_client() call to an in-memory fake."""
    import signalist.auth
    import signalist.db

    client = FakeSupabase()
    monkeypatch.setattr(signalist.db, "get_supabase_client", lambda: client)
    monkeypatch.setattr(signalist.auth, "get_supabase_client", lambda: client)
    return client


def make_article(article_id, timestamp=1_700_000_000, **overrides):
    article = {
        "id": article_id,
        "headline": f"Headline {article_id}",
        "summary": f"Summary for article {article_id}",
        "url": f"https://news.example.com/{article_id}",
        "datetime": timestamp,
        "source": "Reuters",
        "image": "",
        "category": "company",
        "related": "",
    }
    article.update(overrides)
    return article


def make_response(payload, status=200, reason="OK"):
    response = mock.Mock()
    response.ok = 200 <= status < 300
    response.status_code = status
    response.reason = reason
    response.json.return_value = payload
    return response
