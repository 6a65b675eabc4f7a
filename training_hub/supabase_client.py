"""Supabase connection and read helpers for the gyms and training_plans tables."""

import logging
import threading

import httpx
from postgrest.exceptions import APIError
from supabase import Client, create_client

from training_hub.config import (
    GYMS_TABLE,
    PLANS_TABLE,
    SUPABASE_ANON_KEY,
    SUPABASE_SERVICE_KEY,
    SUPABASE_URL,
)

logger = logging.getLogger(__name__)

_client: Client | None = None
_client_lock = threading.Lock()

GYM_COLUMNS = "id, name, address, city, country, image_url"
GYM_API_COLUMNS = "id, name, city, state, country, image_url"
PLAN_LIST_COLUMNS = (
    "id, slug, title, main_image_url, description, price_text, fitness_level, days_per_week"
)


class FetchError(Exception):
    """A read against Supabase failed."""


def get_client() -> Client:
    """Return the Supabase client singleton (thread-safe)."""
    global _client
    if _client is None:
        with _client_lock:
            if _client is None:
                key = SUPABASE_ANON_KEY or SUPABASE_SERVICE_KEY
                if not SUPABASE_URL or not key:
                    raise RuntimeError(
                        "SUPABASE_URL and SUPABASE_ANON_KEY (or SUPABASE_SERVICE_KEY) must be set"
                    )
                _client = create_client(SUPABASE_URL, key)
    return _client


# ---------------------------------------------------------------------------
# Generic helpers
# ---------------------------------------------------------------------------

def _table(name: str):
    """Return a table query builder."""
    return get_client().table(name)


def _execute(q, table: str):
    """Run a query, turning client/transport failures into FetchError."""
    try:
        return q.execute()
    except (APIError, httpx.HTTPError) as e:
        logger.error("Read from %s failed: %s", table, e)
        raise FetchError(f"Failed to read {table}: {e}") from e


def select(table: str, columns: str = "*", match: dict | None = None,
           limit: int | None = None) -> list[dict]:
    """Select rows with optional equality matching."""
    q = _table(table).select(columns)
    if match:
        for k, v in match.items():
            q = q.eq(k, v)
    if limit:
        q = q.limit(limit)
    result = _execute(q, table)
    return result.data or []


def select_one(table: str, columns: str = "*", match: dict | None = None) -> dict | None:
    """Select a single row."""
    rows = select(table, columns, match, limit=1)
    return rows[0] if rows else None


# ---------------------------------------------------------------------------
# Gyms
# ---------------------------------------------------------------------------

def get_gyms(columns: str = GYM_COLUMNS) -> list[dict]:
    """Read the whole gyms table."""
    rows = select(GYMS_TABLE, columns)
    logger.info("Loaded %d gyms", len(rows))
    return rows


# ---------------------------------------------------------------------------
# Training plans
# ---------------------------------------------------------------------------

def get_training_plans() -> list[dict]:
    """Read the whole training_plans table (list columns only)."""
    rows = select(PLANS_TABLE, PLAN_LIST_COLUMNS)
    logger.info("Loaded %d training plans", len(rows))
    return rows


def get_training_plan(slug: str) -> dict | None:
    """Get a single training plan (all columns) by slug."""
    return select_one(PLANS_TABLE, match={"slug": slug})
