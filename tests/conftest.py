from datetime import datetime, timezone
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

from picstash.api.deps import get_unsplash_client
from picstash.config import Settings
from picstash.main import create_app
from picstash.models.photo import Photo
from picstash.models.tag import Tag
from picstash.models.user import User


@pytest.fixture
def settings(tmp_path):
    return Settings(
        _env_file=None,
        unsplash_access_key="test-key",
        database_url="sqlite://",
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def unsplash():
    client = Mock()
    client.search_photos = AsyncMock(return_value=[])
    return client


@pytest.fixture
def app(settings, unsplash):
    app = create_app(settings)
    app.dependency_overrides[get_unsplash_client] = lambda: unsplash
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def db(app):
    session = app.state.session_factory()
    yield session
    session.close()


@pytest.fixture
def make_user(db):
    def _make_user(username="alice", email="alice@example.com"):
        user = User(username=username, email=email)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def make_photo(db):
    def _make_photo(tags=(), date_saved=None, image_url="https://images.unsplash.com/photo-1", user_id=None):
        photo = Photo(
            image_url=image_url,
            description="a photo",
            alt_description="alt text",
            user_id=user_id,
            date_saved=date_saved or datetime(2024, 1, 1, tzinfo=timezone.utc),
        )
        photo.tags = [Tag(name=name) for name in tags]
        db.add(photo)
        db.commit()
        db.refresh(photo)
        return photo
    return _make_photo
