"""Tests for metaspace.services.catalog: avatars, user metadata, bulk lookup, elements and maps."""

import unittest

from metaspace.core.errors import InvalidTokenError, ValidationError
from metaspace.models import Map
from metaspace.schemas.catalog import MapElementPlacement
from metaspace.services.catalog import (
    bulk_user_avatars,
    create_avatar,
    create_element,
    create_map,
    list_avatars,
    parse_dimensions,
    parse_id_list,
    update_user_avatar,
)
from metaspace.services.identity import signup
from support import DatabaseTestCase

IMAGE_URL = "https://example.com/avatars/tymall.png"


class TestParseIdList(unittest.TestCase):
    """parse_id_list accepts the bracketed, comma-separated and repeated forms."""

    def test_bracketed(self) -> None:
        self.assertEqual(parse_id_list(["[a,b,c]"]), ["a", "b", "c"])

    def test_plain_and_repeated(self) -> None:
        self.assertEqual(parse_id_list(["a, b", "c"]), ["a", "b", "c"])

    def test_quotes_whitespace_and_duplicates(self) -> None:
        self.assertEqual(parse_id_list(['["a", "b", "a"]']), ["a", "b"])

    def test_empty(self) -> None:
        self.assertEqual(parse_id_list([]), [])
        self.assertEqual(parse_id_list(["[]"]), [])


class TestParseDimensions(unittest.TestCase):
    def test_valid(self) -> None:
        self.assertEqual(parse_dimensions("100x200"), (100, 200))
        self.assertEqual(parse_dimensions(" 20 X 30 "), (20, 30))

    def test_invalid(self) -> None:
        for value in ("", "100", "100x", "x200", "0x10", "axb", "100x200x3", "-1x5"):
            with self.subTest(value=value):
                with self.assertRaises(ValidationError):
                    parse_dimensions(value)


class TestAvatars(DatabaseTestCase):
    def test_create_and_list(self) -> None:
        db = self.session()
        avatar = create_avatar(db, IMAGE_URL, name="Tymall")
        listed = list_avatars(db)
        self.assertEqual([a.id for a in listed], [avatar.id])
        self.assertEqual(listed[0].image_url, IMAGE_URL)

    def test_blank_image_url_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            create_avatar(self.session(), "  ", name="Tymall")


class TestUserAvatar(DatabaseTestCase):
    """update_user_avatar only accepts existing avatars."""

    def test_sets_avatar(self) -> None:
        db = self.session()
        user = signup(db, "Tamoziit", "123456")
        avatar = create_avatar(db, IMAGE_URL)
        updated = update_user_avatar(db, user.id, avatar.id)
        self.assertEqual(updated.avatar_id, avatar.id)

    def test_unknown_avatar_is_validation_error(self) -> None:
        db = self.session()
        user = signup(db, "Tamoziit", "123456")
        with self.assertRaises(ValidationError):
            update_user_avatar(db, user.id, "123123123")
        db.expire_all()
        self.assertIsNone(db.get(type(user), user.id).avatar_id)

    def test_unknown_user_is_invalid_token(self) -> None:
        db = self.session()
        avatar = create_avatar(db, IMAGE_URL)
        with self.assertRaises(InvalidTokenError):
            update_user_avatar(db, "no-such-user", avatar.id)


class TestBulkUserAvatars(DatabaseTestCase):
    """bulk_user_avatars returns known users in request order and skips unknown ids."""

    def test_returns_known_users_in_order(self) -> None:
        db = self.session()
        alice = signup(db, "alice", "123456")
        bob = signup(db, "bob", "123456")
        avatar = create_avatar(db, IMAGE_URL)
        update_user_avatar(db, alice.id, avatar.id)

        items = bulk_user_avatars(db, [bob.id, "unknown", alice.id], max_ids=10)

        self.assertEqual([i.user_id for i in items], [bob.id, alice.id])
        self.assertIsNone(items[0].image_url)
        self.assertEqual(items[1].avatar_id, avatar.id)
        self.assertEqual(items[1].image_url, IMAGE_URL)

    def test_empty(self) -> None:
        self.assertEqual(bulk_user_avatars(self.session(), [], max_ids=10), [])

    def test_too_many_ids(self) -> None:
        with self.assertRaises(ValidationError):
            bulk_user_avatars(self.session(), ["a", "b", "c"], max_ids=2)


class TestElementsAndMaps(DatabaseTestCase):
    def _placement(self, element_id: str, x: int, y: int) -> MapElementPlacement:
        return MapElementPlacement(element_id=element_id, x=x, y=y)

    def test_create_element(self) -> None:
        element = create_element(self.session(), IMAGE_URL, width=1, height=2, static=True)
        self.assertEqual((element.width, element.height, element.is_static), (1, 2, True))

    def test_create_element_rejects_zero_size(self) -> None:
        with self.assertRaises(ValidationError):
            create_element(self.session(), IMAGE_URL, width=0, height=1, static=False)

    def test_create_map_keeps_placements_in_order(self) -> None:
        db = self.session()
        e1 = create_element(db, IMAGE_URL, width=1, height=1, static=True)
        e2 = create_element(db, IMAGE_URL, width=1, height=1, static=True)
        placements = [
            self._placement(e1.id, 20, 20),
            self._placement(e1.id, 18, 20),
            self._placement(e2.id, 19, 20),
        ]
        game_map = create_map(db, "https://thumbnail.com/a.png", "100x200", placements, name="Office")
        self.assertEqual((game_map.width, game_map.height), (100, 200))
        self.assertEqual(
            [(me.element_id, me.x, me.y) for me in game_map.elements],
            [(e1.id, 20, 20), (e1.id, 18, 20), (e2.id, 19, 20)],
        )

    def test_create_map_without_elements(self) -> None:
        game_map = create_map(self.session(), "https://thumbnail.com/a.png", "10x10", [])
        self.assertEqual(game_map.elements, [])

    def test_unknown_element_rejected_and_nothing_written(self) -> None:
        db = self.session()
        with self.assertRaises(ValidationError):
            create_map(db, "https://thumbnail.com/a.png", "100x200", [self._placement("nope", 1, 1)])
        self.assertEqual(db.query(Map).count(), 0)

    def test_out_of_bounds_placement_rejected(self) -> None:
        db = self.session()
        element = create_element(db, IMAGE_URL, width=1, height=1, static=False)
        with self.assertRaises(ValidationError):
            create_map(db, "https://thumbnail.com/a.png", "10x10", [self._placement(element.id, 10, 0)])
        self.assertEqual(db.query(Map).count(), 0)

    def test_bad_dimensions_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            create_map(self.session(), "https://thumbnail.com/a.png", "100by200", [])


if __name__ == "__main__":
    unittest.main()
