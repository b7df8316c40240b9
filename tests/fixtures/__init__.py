"""Test fixtures for the calendar app.

- events: Event/draft factories, the in-memory backend, and controllers
- api: TestClient wired to a fresh controller
"""
