"""Shared fixtures for the file URL tests."""

import pytest

from fileurl.schemas.url import BaseUrlContext
from fileurl.services.file_url_generator import FileUrlGenerator
from fileurl.stream_wrappers import (
    CdnStreamWrapper,
    LocalStreamWrapper,
    StreamWrapperRegistry,
    TemporaryStreamWrapper,
)


@pytest.fixture
def context():
    return BaseUrlContext(scheme="https", host="example.com", base_path="/")


@pytest.fixture
def subdir_context():
    return BaseUrlContext(scheme="https", host="example.com", base_path="/drupal/")


@pytest.fixture
def registry():
    return StreamWrapperRegistry({
        "public": LocalStreamWrapper("https://example.com/sites/default/files"),
        "private": LocalStreamWrapper("system/files"),
        "temporary": TemporaryStreamWrapper("/system/temporary"),
        "cdn": CdnStreamWrapper("https://cdn.example.com/assets"),
    })


@pytest.fixture
def generator(registry, context):
    return FileUrlGenerator(registry, context)


@pytest.fixture
def subdir_generator(registry, subdir_context):
    return FileUrlGenerator(registry, subdir_context)
