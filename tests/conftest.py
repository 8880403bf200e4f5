"""
Pytest configuration and shared fixtures.
"""

import pytest

from speedmatch.data_models import Profile
from speedmatch.directory import ProfileDirectory
from speedmatch.logger import reset_logging


@pytest.fixture(autouse=True)
def _clean_logging():
    yield
    reset_logging()


@pytest.fixture
def xr_developer() -> Profile:
    """Profile X from the reference scenario."""
    return Profile(
        id="x1",
        name="Xan",
        role="XR Developer",
        skills=["Unity", "WebXR", "React"],
        interests=["Spatial Computing", "Gaming"],
        experience_years=5,
    )


@pytest.fixture
def product_designer() -> Profile:
    """Profile Y from the reference scenario."""
    return Profile(
        id="y1",
        name="Yara",
        role="Product Designer",
        skills=["WebXR", "Three.js", "React"],
        interests=["Spatial Computing", "AI"],
        experience_years=4,
    )


@pytest.fixture
def data_engineer() -> Profile:
    return Profile(
        id="d1",
        name="Dana",
        role="Data Engineer",
        company="Pipelines Inc",
        skills=["Python", "Docker"],
        interests=["Machine Learning", "Cloud Architecture"],
        location="Austin, TX",
        experience_years=6,
    )


@pytest.fixture
def chef() -> Profile:
    return Profile(
        id="c1",
        name="Chris",
        role="Chef",
        skills=["Figma"],
        interests=["Watercolor Painting"],
        location="Paris, France",
        experience_years=25,
    )


@pytest.fixture
def accountant() -> Profile:
    return Profile(
        id="a1",
        name="Ari",
        role="Accountant",
        skills=["Kubernetes"],
        interests=["Marathon Running"],
        location="Austin, TX",
        experience_years=5,
    )


@pytest.fixture
def empty_profile() -> Profile:
    return Profile(id="e1", name="Empty")


@pytest.fixture
def sample_directory() -> ProfileDirectory:
    return ProfileDirectory.sample()
