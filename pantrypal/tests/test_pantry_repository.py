import tempfile
import unittest
from datetime import date
from pathlib import Path

from pantrypal.domain.PantryItem import PantryItem
from pantrypal.domain.errors import InvalidFieldError
from pantrypal.infra.Pantry_Repository import PantryRepository
from pantrypal.infra.paths import DataPaths

UID = "U0000000000000AA"
OTHER = "U0000000000000BB"


class TestPantryRepository(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.paths = DataPaths(Path(self._tmp.name))
        self.repo = PantryRepository(self.paths)
        self.milk = PantryItem("Milk", 2, "L", date(2030, 1, 15), "Dairy")

    def tearDown(self):
        self._tmp.cleanup()

    def test_add_list_remove(self):
        self.repo.append(UID, self.milk)
        items = self.repo.list_for(UID)
        self.assertEqual(len(items), 1)
        self.assertEqual(items[0].quantity, 2)
        self.assertFalse(items[0].is_expired())
        self.assertTrue(self.repo.remove_first(UID, "Milk"))
        self.assertEqual(self.repo.list_for(UID), [])
        self.assertFalse(self.repo.remove_first(UID, "Milk"))

    def test_round_trip_preserves_all_fields(self):
        self.repo.append(UID, self.milk)
        self.assertEqual(self.repo.list_for(UID), [self.milk])
        self.assertIsNot(self.repo.list_for(UID)[0], self.milk)

    def test_row_format(self):
        self.repo.append(UID, self.milk)
        self.assertEqual(
            self.paths.pantry_file.read_text(encoding="utf-8"),
            "U0000000000000AA,Milk,2,L,2030-01-15,Dairy\n",
        )

    def test_list_is_per_user_and_in_file_order(self):
        eggs = PantryItem("Eggs", 12, "pcs", date(2030, 2, 1), "Dairy")
        rice = PantryItem("Rice", 1, "kg", date(2031, 1, 1), "Grains")
        self.repo.append(UID, self.milk)
        self.repo.append(OTHER, rice)
        self.repo.append(UID, eggs)
        self.assertEqual(self.repo.list_for(UID), [self.milk, eggs])
        self.assertEqual(self.repo.list_for(OTHER), [rice])

    def test_list_without_file_is_empty(self):
        self.assertEqual(self.repo.list_for(UID), [])

    def test_remove_without_file_does_not_create_it(self):
        self.assertFalse(self.repo.remove_first(UID, "Milk"))
        self.assertFalse(self.paths.pantry_file.exists())

    def test_remove_only_first_match_and_keeps_other_rows(self):
        self.repo.append(UID, self.milk)
        self.repo.append(OTHER, self.milk)
        self.repo.append(UID, PantryItem("Milk", 5, "L", date(2030, 3, 1), "Dairy"))
        with open(self.paths.pantry_file, "a", encoding="utf-8") as f:
            f.write("not a pantry row\n")
        self.assertTrue(self.repo.remove_first(UID, "Milk"))
        self.assertEqual([i.quantity for i in self.repo.list_for(UID)], [5])
        self.assertEqual(self.repo.list_for(OTHER), [self.milk])
        self.assertIn("not a pantry row", self.paths.pantry_file.read_text(encoding="utf-8"))

    def test_remove_requires_exact_name(self):
        self.repo.append(UID, self.milk)
        self.assertFalse(self.repo.remove_first(UID, "milk"))
        self.assertFalse(self.repo.remove_first(OTHER, "Milk"))

    def test_replace_first(self):
        self.repo.append(UID, self.milk)
        updated = PantryItem("Milk", 7, "L", date(2030, 1, 15), "Dairy")
        self.assertTrue(self.repo.replace_first(UID, "Milk", updated))
        self.assertEqual(self.repo.list_for(UID), [updated])
        self.assertFalse(self.repo.replace_first(UID, "Juice", updated))

    def test_malformed_rows_skipped(self):
        self.repo.append(UID, self.milk)
        with open(self.paths.pantry_file, "a", encoding="utf-8") as f:
            f.write(f"{UID},Eggs,twelve,pcs,2030-01-01,Dairy\n")
            f.write(f"{UID},Eggs,12,pcs,01/01/2030,Dairy\n")
            f.write(f"{UID},Eggs,-1,pcs,2030-01-01,Dairy\n")
            f.write(f"{UID},Eggs,12,pcs,2030-01-01\n")
            f.write(f"{UID},Eggs,12,pcs,2030-01-01,Dairy,extra\n")
            f.write(f"{UID},Eggs,+3,pcs,2030-01-01,Dairy\n")
        items = self.repo.list_for(UID)
        self.assertEqual([i.item_name for i in items], ["Milk", "Eggs"])
        self.assertEqual(items[1].quantity, 3)

    def test_empty_category_and_unit_round_trip(self):
        item = PantryItem("Salt", 1, "", date(2031, 1, 1), "")
        self.repo.append(UID, item)
        self.assertEqual(self.repo.list_for(UID), [item])

    def test_fields_with_separators_rejected(self):
        bad_items = [
            PantryItem("Milk, whole", 1, "L", date(2030, 1, 1), "Dairy"),
            PantryItem("Milk", 1, "L", date(2030, 1, 1), "Dairy\nEggs"),
            PantryItem("Milk", 1, "l,ml", date(2030, 1, 1), "Dairy"),
            PantryItem("Milk", -1, "L", date(2030, 1, 1), "Dairy"),
        ]
        for item in bad_items:
            with self.subTest(item=item):
                with self.assertRaises(InvalidFieldError):
                    self.repo.append(UID, item)
        self.assertFalse(self.paths.pantry_file.exists())


    def test_malformed_row_with_same_name_is_not_removed_or_replaced(self):
        self.paths.ensure_base_dir()
        self.paths.pantry_file.write_text(f"{UID},Milk,lots,L,2030-01-15,Dairy\n", encoding="utf-8")
        self.repo.append(UID, self.milk)

        updated = PantryItem("Milk", 5, "L", date(2030, 1, 15), "Dairy")
        self.assertTrue(self.repo.replace_first(UID, "Milk", updated))
        self.assertEqual(self.repo.list_for(UID), [updated])

        self.assertTrue(self.repo.remove_first(UID, "Milk"))
        self.assertEqual(self.repo.list_for(UID), [])
        self.assertEqual(
            self.paths.pantry_file.read_text(encoding="utf-8"),
            f"{UID},Milk,lots,L,2030-01-15,Dairy\n",
        )
        self.assertFalse(self.repo.remove_first(UID, "Milk"))
