"""Test cases for the document dataclasses and their dict form."""

import unittest

from dental_data_form.models import (
    ITEM_FACTORIES,
    Document,
    LinkBlock,
    RepeatedGroup,
    Section,
    SnapshotFormatError,
    document_from_dict,
    group_items,
    to_dict,
)


class DocumentShapeTest(unittest.TestCase):

    def test_default_rows_are_independent(self):
        first, second = Document(), Document()
        first.sections[0].description.paragraph1 = "changed"
        self.assertEqual(second.sections[0].description.paragraph1, "")

    def test_item_factories_give_empty_items(self):
        self.assertEqual(ITEM_FACTORIES[RepeatedGroup.LINK_BLOCKS](), LinkBlock("", "", ""))
        section = ITEM_FACTORIES[RepeatedGroup.SECTIONS]()
        self.assertEqual(section, Section())
        self.assertEqual(section.description.bullet_points, [])

    def test_group_items_accepts_values(self):
        document = Document()
        self.assertIs(group_items(document, RepeatedGroup.LINK_CARDS), document.link_cards)
        self.assertIs(group_items(document, "call_to_actions"), document.call_to_actions)

    def test_to_dict(self):
        data = to_dict(Document())
        self.assertEqual(data["callToActions"], [{"name": "", "link": ""}])
        self.assertEqual(data["linkBlocks"], [{"title": "", "subTitle": "", "link": ""}])
        self.assertIs(data["isLinkCards"], False)

    def test_from_dict_round_trip(self):
        document = Document(heading_bold="Implants")
        document.sections[0].description.bullet_points = ["a"]
        self.assertEqual(document_from_dict(to_dict(document)), document)

    def test_from_dict_reports_location(self):
        data = to_dict(Document())
        del data["sections"][0]["description"]["paragraph2"]
        with self.assertRaises(SnapshotFormatError) as ctx:
            document_from_dict(data)
        self.assertIn("document.sections[0].description", str(ctx.exception))
        self.assertIn("paragraph2", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
