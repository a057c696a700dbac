"""Test cases for typed field paths and descriptor parsing."""

import unittest

from dental_data_form.locations import (
    CallToActionField,
    LinkBlockField,
    LinkCardField,
    LocationError,
    RootField,
    SectionDescriptionField,
    SectionField,
    parse_boolean_field,
    parse_field_path,
    parse_group,
)
from dental_data_form.models import RepeatedGroup
from dental_data_form.paths import split_path, to_camel, to_snake


class FieldPathVariantTest(unittest.TestCase):

    def test_variant_only_accepts_its_fields(self):
        SectionDescriptionField(0, "paragraph1")
        LinkBlockField(0, "sub_title")
        with self.assertRaises(LocationError):
            SectionField(0, "paragraph1")
        with self.assertRaises(LocationError):
            LinkCardField(0, "sub_title")
        with self.assertRaises(LocationError):
            RootField("image")

    def test_bullet_points_not_editable(self):
        with self.assertRaises(LocationError):
            SectionDescriptionField(0, "bullet_points")

    def test_index_must_be_non_negative_int(self):
        for bad in (-1, "0", True, 1.0):
            with self.assertRaises(LocationError, msg=repr(bad)):
                CallToActionField(bad, "name")

    def test_group_of_variant(self):
        self.assertIsNone(RootField.group)
        self.assertIs(SectionDescriptionField.group, RepeatedGroup.SECTIONS)
        self.assertIs(LinkCardField(0, "link").group, RepeatedGroup.LINK_CARDS)

    def test_paths_are_hashable_values(self):
        self.assertEqual(SectionField(1, "image"), SectionField(1, "image"))
        self.assertNotEqual(SectionField(1, "image"), SectionField(2, "image"))
        self.assertEqual(len({RootField("hero_image"), RootField("hero_image")}), 1)


class ParseFieldPathTest(unittest.TestCase):

    def test_descriptors(self):
        test_cases = [
            ("headingBold", RootField("heading_bold")),
            ("root.heroImage", RootField("hero_image")),
            ("callToActions.0.link", CallToActionField(0, "link")),
            ("call_to_actions[2].name", CallToActionField(2, "name")),
            ("sections.1.image", SectionField(1, "image")),
            ("sections.1.description.paragraph2", SectionDescriptionField(1, "paragraph2")),
            ("linkCards.3.title", LinkCardField(3, "title")),
            ("linkBlocks.0.subTitle", LinkBlockField(0, "sub_title")),
        ]
        for descriptor, expected in test_cases:
            self.assertEqual(parse_field_path(descriptor), expected, descriptor)

    def test_malformed(self):
        for descriptor in (
            "",
            "sections.1",
            "sections.one.image",
            "callToActions.0.description.paragraph1",
            "sections.0.summary.paragraph1",
            "footers.0.title",
            "sections.0.description.paragraph1.extra",
        ):
            with self.assertRaises(LocationError, msg=descriptor):
                parse_field_path(descriptor)

    def test_parse_group_and_boolean(self):
        self.assertIs(parse_group("linkBlocks"), RepeatedGroup.LINK_BLOCKS)
        self.assertIs(parse_group("sections"), RepeatedGroup.SECTIONS)
        self.assertEqual(parse_boolean_field("isLinkCards"), "is_link_cards")
        with self.assertRaises(LocationError):
            parse_boolean_field("heroImage")


class PathHelpersTest(unittest.TestCase):

    def test_split_path(self):
        self.assertEqual(split_path("sections[1].description.paragraph1"),
                         ["sections", "1", "description", "paragraph1"])
        self.assertEqual(split_path(" a . b "), ["a", "b"])
        self.assertEqual(split_path(None), [])

    def test_case_conversion(self):
        for snake, camel in (("sub_title", "subTitle"), ("is_link_cards", "isLinkCards"),
                             ("paragraph1", "paragraph1"), ("hero_image", "heroImage")):
            self.assertEqual(to_camel(snake), camel)
            self.assertEqual(to_snake(camel), snake)


if __name__ == '__main__':
    unittest.main()
