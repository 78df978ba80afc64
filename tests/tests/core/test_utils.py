#!/usr/bin/env python3
import json
from pathlib import Path

import pytest

from vcschema.core.constants import CONTEXT_BASE_URL, SCHEMA_BASE_URL
from vcschema.core.utils import (
    generate_artifact_name,
    generate_context_url,
    generate_schema_id,
    is_slug,
    load_json_file,
    merge_dicts,
    to_kebab_case,
    to_pascal_case,
    vocab_namespace,
)


# --- to_kebab_case --- #

@pytest.mark.parametrize("raw,expected", [
    ("Home Credential", "home-credential"),
    ("  Home   Credential!  ", "home-credential"),
    ("a -- b", "a-b"),
    ("Résumé 2024", "rsum-2024"),
    ("-leading and trailing-", "leading-and-trailing"),
    ("", ""),
    (None, ""),
    ("!!!", ""),
])
def test_to_kebab_case(raw, expected):
    assert to_kebab_case(raw) == expected


# --- to_pascal_case --- #

@pytest.mark.parametrize("raw,expected", [
    ("Home Credential", "HomeCredential"),
    ("addr", "Addr"),
    ("mailing_address", "MailingAddress"),
    ("land-title", "LandTitle"),
    ("HOME credential", "HomeCredential"),
    ("Home (2024) Credential", "Home2024Credential"),
    ("", ""),
    (None, ""),
])
def test_to_pascal_case(raw, expected):
    assert to_pascal_case(raw) == expected


def test_is_slug():
    assert is_slug("home-credential")
    assert is_slug("v2")
    assert not is_slug("Home")
    assert not is_slug("a--b")
    assert not is_slug("-a")
    assert not is_slug("")


# --- Artifact naming --- #

def test_generate_artifact_name_parts_are_optional():
    assert generate_artifact_name("Land Title", "Home Credential") == "land-title-home-credential"
    assert generate_artifact_name(None, "Home Credential") == "home-credential"
    assert generate_artifact_name("Land Title", None) == "land-title"
    assert generate_artifact_name(None, None) == ""


def test_generate_schema_id_prefers_category_and_name_over_title():
    assert (
        generate_schema_id("Ignored Title", "Land Title", "Home")
        == f"{SCHEMA_BASE_URL}/land-title-home.schema.json"
    )


def test_generate_schema_id_falls_back_to_title():
    assert generate_schema_id("Home Credential") == f"{SCHEMA_BASE_URL}/home-credential.schema.json"


def test_generate_schema_id_is_empty_without_usable_input():
    assert generate_schema_id("") == ""
    assert generate_schema_id("!!!") == ""


def test_generate_schema_id_is_stable_across_calls():
    assert generate_schema_id("Home Credential") == generate_schema_id("Home Credential")


def test_generate_schema_id_custom_base_url_trailing_slash():
    assert (
        generate_schema_id("Home", base_url="https://example.org/s/")
        == "https://example.org/s/home.schema.json"
    )


def test_generate_context_url():
    assert (
        generate_context_url("Home Credential")
        == f"{CONTEXT_BASE_URL}/home-credential.context.jsonld"
    )
    assert generate_context_url(None) == ""


# --- vocab_namespace --- #

@pytest.mark.parametrize("url,expected", [
    ("https://example.org/vocab.jsonld", "https://example.org/vocab.jsonld#"),
    ("https://example.org/vocab#", "https://example.org/vocab#"),
    ("https://example.org/vocab/", "https://example.org/vocab/"),
])
def test_vocab_namespace(url, expected):
    assert vocab_namespace(url) == expected


# --- merge_dicts --- #

def test_merge_dicts_recurses_and_does_not_mutate_inputs():
    base = {"a": 1, "nested": {"x": 1, "y": 2}}
    override = {"b": 2, "nested": {"y": 3}}
    merged = merge_dicts(base, override)

    assert merged == {"a": 1, "b": 2, "nested": {"x": 1, "y": 3}}
    assert base == {"a": 1, "nested": {"x": 1, "y": 2}}


def test_merge_dicts_non_dict_override_replaces():
    assert merge_dicts({"k": {"x": 1}}, {"k": 5}) == {"k": 5}


# --- load_json_file --- #

def test_load_json_file_missing_returns_empty(tmp_path: Path):
    assert load_json_file(tmp_path / "nope.json") == {}


def test_load_json_file_reads_payload(tmp_path: Path):
    p = tmp_path / "c.json"
    p.write_text(json.dumps({"a": 1}), encoding="utf-8")
    assert load_json_file(p) == {"a": 1}


def test_load_json_file_invalid_json_raises(tmp_path: Path):
    p = tmp_path / "bad.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        load_json_file(p)
