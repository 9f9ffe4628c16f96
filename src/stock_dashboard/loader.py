"""Startup data source: a JSON array of products from a URL or a file."""

import json
import logging
from pathlib import Path

import requests
from pydantic import TypeAdapter

from .models import ProductRecord

logger = logging.getLogger(__name__)

_records = TypeAdapter(list[ProductRecord])


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def fetch_json(source: str, timeout: float = 10.0) -> object:
    """Read raw JSON from an http(s) URL or a local path."""
    if is_url(source):
        resp = requests.get(source, timeout=timeout)
        resp.raise_for_status()
        return resp.json()

    with open(Path(source).expanduser(), encoding="utf-8") as f:
        return json.load(f)


def parse_products(data: object) -> list[ProductRecord]:
    """Validate a decoded payload as a list of product records.

    Raises pydantic's ValidationError (a ValueError) on malformed data.
    """
    return _records.validate_python(data)


def load_products(source: str, timeout: float = 10.0) -> list[ProductRecord]:
    """Fetch and validate products, degrading to an empty list on any failure.

    There is no retry and no error surfaced beyond the log record.
    """
    try:
        records = parse_products(fetch_json(source, timeout=timeout))
    except requests.RequestException as e:
        logger.warning("Could not fetch products from %s: %s", source, e)
        return []
    except OSError as e:
        logger.warning("Could not read products from %s: %s", source, e)
        return []
    except ValueError as e:
        logger.warning("Malformed product data in %s: %s", source, e)
        return []

    logger.info("Loaded %d products from %s", len(records), source)
    return records
