import pytest

from app.core.exceptions import InvalidReference, NotFound, PermissionDenied
from app.core.ids import new_id
from app.modules.posts.comments.models.comment import PostComment
from app.modules.posts.comments.services.comment import add_comment
from app.modules.posts.likes.models.like import PostLike
from app.modules.posts.likes.services.like import toggle_like
from app.modules.posts.models.post import Post
from app.modules.posts.schemas.post import Post as PostSchema, PostCreate
from app.modules.posts.services.post import (
    create_post, create_post_and_list, delete_post, get_post
)

API = "/api/v1"


def test_create_post_copies_author_profile(db, make_user):
    author = make_user(first_name="Ada", last_name="Lovelace", location="London", picture_path="ada.png")
    post = create_post(db, PostCreate(user_id=author.id, description="First!", picture_path="p1.jpg"))

    assert post.author_id == author.id
    assert post.author_first_name == "Ada"
    assert post.author_last_name == "Lovelace"
    assert post.author_location == "London"
    assert post.author_picture_path == "ada.png"
    assert post.description == "First!"
    assert post.picture_path == "p1.jpg"
    assert post.like_set == frozenset()
    assert post.comments == []
    assert post.created_at is not None


def test_author_snapshot_is_not_refreshed(db, make_user, make_post):
    author = make_user(first_name="Old")
    post = make_post(author)

    author.first_name = "New"
    db.commit()

    assert get_post(db, post.id).author_first_name == "Old"


def test_create_post_malformed_author_leaves_store_untouched(db):
    with pytest.raises(InvalidReference):
        create_post(db, PostCreate(user_id="12345", description="x"))
    assert db.query(Post).count() == 0


def test_create_post_unknown_author(db):
    with pytest.raises(NotFound):
        create_post(db, PostCreate(user_id=new_id(), description="x"))
    assert db.query(Post).count() == 0


def test_create_post_and_list_returns_whole_feed(db, make_user):
    a, b = make_user(), make_user()
    create_post(db, PostCreate(user_id=a.id, description="one"))
    feed = create_post_and_list(db, PostCreate(user_id=b.id, description="two"))

    assert [p.description for p in feed] == ["two", "one"]


def test_get_post_missing(db):
    with pytest.raises(NotFound):
        get_post(db, new_id())
    with pytest.raises(NotFound):
        get_post(db, "not-even-a-uuid")


def test_serialized_post_shape(db, make_user, make_post):
    author, fan = make_user(), make_user()
    post = make_post(author)
    toggle_like(db, post.id, fan.id)
    post = add_comment(db, post.id, fan.id, "nice")

    data = PostSchema.model_validate(post).model_dump(by_alias=True)
    assert set(data) == {
        "id", "authorId", "authorFirstName", "authorLastName", "authorLocation",
        "authorPicturePath", "description", "picturePath", "likes", "comments", "createdAt",
    }
    assert data["likes"] == {fan.id: True}
    assert data["comments"][0]["commentText"] == "nice"
    assert data["comments"][0]["ordinal"] == 0


def test_delete_post_removes_likes_and_comments(db, make_user, make_post):
    author, fan = make_user(), make_user()
    keep = make_post(author, description="keep")
    doomed = make_post(author, description="doomed")
    toggle_like(db, doomed.id, fan.id)
    add_comment(db, doomed.id, fan.id, "bye")
    doomed_id = doomed.id

    deleted = delete_post(db, doomed_id, author.id)

    assert deleted.id == doomed_id
    assert deleted.likes == {fan.id: True}
    with pytest.raises(NotFound):
        get_post(db, doomed_id)
    assert db.query(PostLike).count() == 0
    assert db.query(PostComment).count() == 0
    assert get_post(db, keep.id).description == "keep"


def test_delete_post_requires_author(db, make_user, make_post):
    author, other = make_user(), make_user()
    post = make_post(author)

    with pytest.raises(PermissionDenied):
        delete_post(db, post.id, other.id)
    assert get_post(db, post.id).id == post.id


def test_api_create_post_returns_feed(client, make_user):
    author = make_user(first_name="Ada")
    response = client.post(
        f"{API}/posts",
        json={"userId": author.id, "description": "hello", "picturePath": "pic.jpg"},
    )

    assert response.status_code == 201
    feed = response.json()
    assert isinstance(feed, list) and len(feed) == 1
    assert feed[0]["authorId"] == author.id
    assert feed[0]["authorFirstName"] == "Ada"
    assert feed[0]["picturePath"] == "pic.jpg"
    assert feed[0]["likes"] == {}
    assert feed[0]["comments"] == []


def test_api_create_post_can_return_single_post(client, make_user):
    author = make_user()
    response = client.post(
        f"{API}/posts?respond_with=post",
        json={"userId": author.id, "description": "solo"},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["description"] == "solo"
    assert client.get(f"{API}/posts/{body['id']}").json()["id"] == body["id"]


def test_api_create_post_errors(client):
    response = client.post(f"{API}/posts", json={"userId": "bad", "description": "x"})
    assert response.status_code == 400
    assert response.json() == {"message": "Invalid userId: 'bad'"}

    response = client.post(f"{API}/posts", json={"userId": new_id(), "description": "x"})
    assert response.status_code == 404

    response = client.post(f"{API}/posts", json={"userId": new_id()})
    assert response.status_code == 422

    assert client.get(f"{API}/posts").json() == []


def test_api_get_missing_post(client):
    response = client.get(f"{API}/posts/{new_id()}")
    assert response.status_code == 404
    assert response.json() == {"message": "Post not found"}


def test_api_delete_post(client, make_user, make_post):
    author, other = make_user(), make_user()
    post = make_post(author)

    assert client.delete(f"{API}/posts/{post.id}", params={"userId": other.id}).status_code == 403
    response = client.delete(f"{API}/posts/{post.id}", params={"userId": author.id})
    assert response.status_code == 200
    assert response.json()["id"] == post.id
    assert client.get(f"{API}/posts/{post.id}").status_code == 404


def test_api_store_fault_is_reported(client, monkeypatch):
    from app.core.exceptions import StoreFault
    from app.modules.posts.api import router as posts_router

    def broken(db, post_id):
        raise StoreFault("Could not read post")

    monkeypatch.setattr(posts_router, "get_post", broken)
    response = client.get(f"{API}/posts/{new_id()}")
    assert response.status_code == 500
    assert response.json() == {"message": "Could not read post"}
