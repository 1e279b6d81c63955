from datetime import datetime, timedelta

from blogapp.models import Blog, MediaItem, MediaType
from blogapp.repositories import blogs as blog_repo

BASE = datetime(2024, 1, 1, 12, 0, 0)


def make_blog(i, user_id=1, published=True, tags=None, category_id=None):
    created = BASE + timedelta(minutes=i)
    return Blog(
        user_id=user_id,
        username=f"user{user_id}",
        category_id=category_id,
        title=f"Blog {i}",
        content="c" * 60,
        tags=tags or [],
        is_published=published,
        created_at=created,
        published_at=created if published else None,
    )


def test_create_assigns_id_and_roundtrips(app):
    blog = make_blog(1)
    blog.media_items = [MediaItem(url="https://cdn/v.mp4", type=MediaType.VIDEO, order=2)]
    blog_repo.create(blog)
    assert blog.id

    loaded = blog_repo.get_by_id(blog.id)
    assert loaded.title == "Blog 1"
    assert loaded.media_items[0].type is MediaType.VIDEO
    assert loaded.media_items[0].order == 2


def test_get_by_malformed_id_returns_none(app):
    assert blog_repo.get_by_id("xyz") is None
    assert blog_repo.get_by_id(None) is None


def test_pages_are_newest_first(app):
    for i in range(5):
        blog_repo.create(make_blog(i))

    first = blog_repo.list_all(1, 2)
    second = blog_repo.list_all(2, 2)
    third = blog_repo.list_all(3, 2)
    assert [b.title for b in first] == ["Blog 4", "Blog 3"]
    assert [b.title for b in second] == ["Blog 2", "Blog 1"]
    assert [b.title for b in third] == ["Blog 0"]
    assert blog_repo.total_count() == 5


def test_published_listing_sorts_by_publish_time(app):
    early = make_blog(1)
    early.published_at = BASE + timedelta(days=10)
    blog_repo.create(early)
    blog_repo.create(make_blog(2))
    blog_repo.create(make_blog(3, published=False))

    titles = [b.title for b in blog_repo.list_published(1, 10)]
    assert titles == ["Blog 1", "Blog 2"]


def test_user_and_category_filters(app):
    blog_repo.create(make_blog(1, user_id=1, category_id=5))
    blog_repo.create(make_blog(2, user_id=2, category_id=5))
    blog_repo.create(make_blog(3, user_id=1))

    assert [b.title for b in blog_repo.list_by_user(1, 1, 10)] == ["Blog 3", "Blog 1"]
    assert blog_repo.user_blogs_count(1) == 2
    assert [b.title for b in blog_repo.list_by_category(5, 1, 10)] == ["Blog 2", "Blog 1"]
    assert blog_repo.category_blogs_count(5) == 2


def test_search_tag_match_is_exact(app):
    blog_repo.create(make_blog(1, tags=["python"]))
    blog_repo.create(make_blog(2, tags=["pythonic"]))
    assert [b.title for b in blog_repo.search("python", 1, 10)] == ["Blog 1"]


def test_increment_is_atomic_update_not_replace(app):
    blog = blog_repo.create(make_blog(1))
    stale = blog_repo.get_by_id(blog.id)

    for _ in range(3):
        assert blog_repo.increment_view_count(blog.id)

    assert blog_repo.get_by_id(blog.id).view_count == 3
    # the stale copy was never written back
    assert stale.view_count == 0


def test_increment_unknown_blog(app):
    assert blog_repo.increment_view_count("000000000000000000000000") is False
    assert blog_repo.increment_view_count("bad-id") is False


def test_update_replaces_document(app):
    blog = blog_repo.create(make_blog(1))
    blog.title = "Renamed"
    blog.tags = ["x"]
    blog_repo.update(blog)
    loaded = blog_repo.get_by_id(blog.id)
    assert loaded.title == "Renamed"
    assert loaded.tags == ["x"]


def test_delete(app):
    blog = blog_repo.create(make_blog(1))
    blog_repo.delete(blog.id)
    assert blog_repo.get_by_id(blog.id) is None
    blog_repo.delete("bad-id")


def test_set_published_stamps_once():
    blog = make_blog(1, published=False)
    first = BASE + timedelta(days=1)
    blog.set_published(True, now=first)
    assert blog.published_at == first

    blog.set_published(False, now=BASE + timedelta(days=2))
    blog.set_published(True, now=BASE + timedelta(days=3))
    assert blog.is_published is True
    assert blog.published_at == first
