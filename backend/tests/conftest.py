"""Shared test configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

SAMPLE_RESUME = """Priya Sharma
priya.sharma@example.com

EXPERIENCE
Software Engineer, Acme Corp
January 2020 - March 2021
Backend Intern, Initech
June 2019 - August 2019

PROJECTS
• Inventory Tracker App March 2022
• Chat Server December 2021
- Portfolio Website built with React

TECHNICAL SKILLS
Languages: Java, Python, SQL
Frameworks: Spring Boot, React
CGPA: 9.2

EDUCATION
B.Tech in Computer Science, XYZ University
"""

SAMPLE_JOB = """Platform Engineer
Required skills: Docker, Kubernetes, AWS
"""

BARE_RESUME = (
    "Hello there, I am Alex and I really enjoy hiking in the mountains on weekends."
)


@pytest.fixture
def sample_resume() -> str:
    return SAMPLE_RESUME


@pytest.fixture
def sample_job() -> str:
    return SAMPLE_JOB


@pytest.fixture
def bare_resume() -> str:
    return BARE_RESUME


@pytest.fixture
def client():
    """TestClient over emptied stores with rate limiting off."""
    from api.dependencies import get_job_match_store, get_resume_store
    from api.router import limiter
    from main import app

    stores = (get_resume_store(), get_job_match_store())
    for store in stores:
        store.clear()
    limiter.enabled = False

    yield TestClient(app, raise_server_exceptions=False)

    for store in stores:
        store.clear()
    limiter.enabled = True
