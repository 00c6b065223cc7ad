import pytest

from seoredirects.models import RedirectModel


@pytest.fixture(autouse=True)
def _deployed_env(monkeypatch):
    """Run every test as a deployed (non-local) invocation with no BASE_URL override."""
    monkeypatch.setenv('APP_ENV', 'test')
    monkeypatch.delenv('AWS_SAM_LOCAL', raising=False)
    monkeypatch.delenv('BASE_URL', raising=False)
    monkeypatch.delenv('APP_NAME', raising=False)


@pytest.fixture
def redirect() -> RedirectModel:
    return RedirectModel(
        title='Hello World',
        desc='Test **bold**',
        url='https://example.com',
        image='https://example.com/cover.png',
        keywords='hello, world',
        site_name='Example',
        created_at='2025-10-15T12:00:00.000Z',
        updated_at='2025-10-15T12:00:00.000Z',
    )
