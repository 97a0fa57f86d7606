import logging
import threading
import unittest
from unittest import mock
from itertools import product
import numpy as np
from xtalsym.crystal import (
    CrystalSystem,
    LaueSystem,
    SpaceGroup,
    SpaceGroupCatalog,
    SpaceGroupNotFound,
    SymmetryOperation,
    asu_mask,
    by_name,
    by_number,
    get_catalog,
)
from xtalsym.crystal import space_group

LOG = logging.getLogger(__name__)

_R = np.arange(-3, 4)
HKL_GRID = np.stack(np.meshgrid(_R, _R, _R, indexing="ij"), axis=-1).reshape(-1, 3)

SG19 = ("+x,+y,+z", "1/2-x,-y,1/2+z", "1/2+x,1/2-y,-z", "-x,1/2+y,1/2-z")


class SpaceGroupCatalogTestCase(unittest.TestCase):
    catalog = get_catalog()

    def test_completeness(self):
        self.assertEqual(len(self.catalog), 230)
        self.assertEqual(list(self.catalog.numbers), list(range(1, 231)))
        for number in self.catalog.numbers:
            sg = self.catalog.by_number(number)
            self.assertIsNotNone(sg)
            self.assertEqual(sg.number, number)
        self.assertEqual([sg.number for sg in self.catalog], list(range(1, 231)))

    def test_operator_counts(self):
        for sg in self.catalog:
            self.assertEqual(len(sg.symops), sg.num_sym_equiv, sg)
            self.assertEqual(sg.num_sym_equiv % sg.num_primitive_sym_equiv, 0, sg)
            expected = {"P": 1, "A": 2, "B": 2, "C": 2, "I": 2, "R": 3, "F": 4}
            self.assertEqual(sg.centering_multiplicity, expected[sg.centering], sg)
            self.assertEqual(len(set(sg.symops)), len(sg.symops), sg)

    def test_identity_first(self):
        for sg in self.catalog:
            self.assertTrue(sg.symops[0].is_identity(), sg)
            self.assertEqual(sg.symops[0], SymmetryOperation.identity())

    def test_translations_reduced(self):
        for sg in self.catalog:
            for symop in sg.symops:
                self.assertTrue(all(0 <= t < 1 for t in symop.translation), symop)

    def test_closed_under_composition(self):
        for number in (14, 19, 62, 148, 167, 178, 194, 212, 227):
            sg = self.catalog.by_number(number)
            symops = set(sg.symops)
            for a, b in product(sg.symops, repeat=2):
                self.assertIn(a.compose(b).reduced(), symops, sg)

    def test_name_round_trip(self):
        for sg in self.catalog:
            self.assertIs(self.catalog.by_name(sg.short_name), sg)
            self.assertIs(self.catalog.by_name(sg.short_name.lower()), sg)
            self.assertIs(SpaceGroup.from_symbol(sg.pdb_name), sg)
            self.assertIs(SpaceGroup.from_symbol(sg.short_name), sg)

    def test_p212121(self):
        sg = by_number(19)
        self.assertEqual(sg.short_name, "P212121")
        self.assertEqual(sg.pdb_name, "P 21 21 21")
        self.assertEqual(sg.point_group_name, "222")
        self.assertEqual(sg.crystal_system, CrystalSystem.ORTHORHOMBIC)
        self.assertEqual(sg.laue_system, LaueSystem.L222)
        self.assertEqual(sg.num_sym_equiv, 4)
        self.assertEqual(sg.num_primitive_sym_equiv, 4)
        self.assertEqual(set(sg.symops), {SymmetryOperation.from_string_code(x) for x in SG19})
        self.assertEqual(sg.symbol_unicode, "P2₁2₁2₁")
        self.assertTrue(sg.is_sohncke)
        self.assertFalse(sg.is_centrosymmetric)
        self.assertEqual(sg.latt, -1)
        self.assertEqual(repr(sg), "<SpaceGroup 19: P212121>")

    def test_fm3m(self):
        sg = by_number(225)
        self.assertEqual(sg.short_name, "Fm-3m")
        self.assertEqual(sg.num_sym_equiv, 192)
        self.assertEqual(sg.num_primitive_sym_equiv, 48)
        self.assertEqual(sg.centering_multiplicity, 4)
        self.assertEqual(sg.crystal_system, CrystalSystem.CUBIC)
        self.assertEqual(sg.laue_system, LaueSystem.LM3M)
        self.assertEqual(sg.latt, 4)
        self.assertEqual(sg.symbol_unicode, "Fm3̅m")
        self.assertEqual(len(sg.reciprocal_rotations), 48)

    def test_rhombohedral(self):
        sg = by_name("R-3")
        self.assertEqual(sg.number, 148)
        self.assertEqual(sg.pdb_name, "H -3")
        self.assertEqual(sg.num_sym_equiv, 18)
        self.assertEqual(sg.centering_multiplicity, 3)
        self.assertEqual(sg.latt, 3)
        self.assertEqual(sg.lattice_type, "hexagonal")
        self.assertIn(SymmetryOperation.from_string_code("x+2/3,y+1/3,z+1/3"), sg.symops)

    def test_monoclinic(self):
        sg = SpaceGroup.from_symbol("P 1 21/c 1")
        self.assertEqual(sg.number, 14)
        self.assertEqual(sg.symbol, "P21/c")
        self.assertEqual(sg.symbol_unicode, "P2₁/c")
        self.assertEqual(sg.laue_system, LaueSystem.L121)
        self.assertIn(SymmetryOperation.from_string_code("-x,y+1/2,-z+1/2"), sg.symops)
        self.assertEqual(sg.latt, 1)

    def test_idempotent(self):
        self.assertIs(by_number(19), by_number(19))
        self.assertIs(get_catalog(), get_catalog())
        self.assertIs(SpaceGroup.from_number(19), by_name("P212121"))

    def test_not_found(self):
        for number in (0, 231, -1, 1.5, "19", None, True):
            self.assertIsNone(by_number(number))
        for name in ("nope", "", "P 21 21 21", "P2121"):
            self.assertIsNone(by_name(name))
        with self.assertRaises(SpaceGroupNotFound):
            SpaceGroup.from_number(231)
        with self.assertRaises(ValueError):
            SpaceGroup.from_symbol("P 7")

    def test_crystal_system(self):
        for sg in self.catalog:
            self.assertEqual(
                sg.crystal_system, CrystalSystem.from_space_group_number(sg.number), sg
            )
            self.assertEqual(sg.point_group.crystal_system, sg.crystal_system.value, sg)

    def test_point_group(self):
        for sg in self.catalog:
            pg = sg.point_group
            self.assertEqual(pg.order, sg.num_primitive_sym_equiv, sg)
            self.assertEqual(pg.is_centrosymmetric, sg.is_centrosymmetric, sg)
            self.assertEqual(len({s.rotation for s in sg.symops}), pg.order, sg)

    def test_classification_counts(self):
        self.assertEqual(sum(sg.is_centrosymmetric for sg in self.catalog), 92)
        self.assertEqual(sum(sg.is_sohncke for sg in self.catalog), 65)

    def test_laue_asu_partition(self):
        for sg in self.catalog:
            rotations = np.array([r.rotation for r in sg.reciprocal_rotations])
            expected = sg.num_primitive_sym_equiv * (1 if sg.is_centrosymmetric else 2)
            self.assertEqual(len(rotations), expected, sg)
            images = np.einsum("ni,mij->mnj", HKL_GRID, rotations)
            mask = asu_mask(sg.laue_system, images)
            self.assertTrue(mask.any(axis=0).all(), sg)
            first = images[mask.argmax(axis=0), np.arange(len(HKL_GRID))]
            same = (images == first[np.newaxis]).all(axis=-1)
            self.assertTrue((~mask | same).all(), sg)

    def test_reflections(self):
        sg = by_number(19)
        self.assertTrue(sg.in_asu(1, 2, 3))
        self.assertFalse(sg.in_asu(-1, 2, 3))
        self.assertEqual(sg.asu_reflection((-1, 2, -3)), (1, 2, 3))
        self.assertEqual(len(sg.symmetry_equivalent_reflections((1, 2, 3))), 8)
        sg = by_number(1)
        self.assertEqual(sg.symmetry_equivalent_reflections((1, 2, 3)), [(-1, -2, -3), (1, 2, 3)])
        self.assertEqual(sg.asu_reflection((-1, -2, -3)), (1, 2, 3))

    def test_apply_all_symops(self):
        sg = by_number(19)
        coords = np.random.rand(5, 3)
        indices, transformed = sg.apply_all_symops(coords)
        self.assertEqual(transformed.shape, (20, 3))
        np.testing.assert_array_equal(indices, np.repeat(np.arange(4), 5))
        np.testing.assert_allclose(transformed[:5], coords)

    def test_cell_compatibility(self):
        self.assertTrue(by_number(225).is_compatible_cell(5, 5, 5, 90, 90, 90))
        self.assertFalse(by_number(225).is_compatible_cell(5, 5, 6, 90, 90, 90))
        self.assertTrue(by_number(148).is_compatible_cell(6, 6, 6, 80, 80, 80))
        self.assertTrue(by_number(148).is_compatible_cell(5, 5, 14, 90, 90, 120))

    def test_cif_section(self):
        self.assertEqual(by_number(1).cif_section, "1 +x,+y,+z")
        self.assertEqual(by_number(2).cif_section, "1 +x,+y,+z\n2 -x,-y,-z")

    def test_repr(self):
        self.assertEqual(repr(self.catalog), "<SpaceGroupCatalog: 230 space groups>")

    def test_invalid_space_group(self):
        identity = SymmetryOperation.identity()
        with self.assertRaises(ValueError):
            SpaceGroup(1, "P1", "P 1", "1", CrystalSystem.TRICLINIC, LaueSystem.L111, 2, 2, (identity,))
        with self.assertRaises(ValueError):
            SpaceGroup(
                1, "P1", "P 1", "1", CrystalSystem.TRICLINIC, LaueSystem.L111, 1, 1,
                (identity.inverted(),)
            )
        with self.assertRaises(ValueError):
            SpaceGroupCatalog([by_number(2)])

    def test_concurrent_first_use(self):
        results = []
        build = mock.Mock(wraps=SpaceGroupCatalog.from_table)

        def lookup():
            results.append(get_catalog())

        with mock.patch.object(space_group, "_CATALOG", None), mock.patch.object(
            SpaceGroupCatalog, "from_table", build
        ):
            threads = [threading.Thread(target=lookup) for _ in range(8)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()
        self.assertEqual(build.call_count, 1)
        self.assertEqual(len(results), 8)
        self.assertTrue(all(c is results[0] for c in results))
        self.assertEqual(len(results[0]), 230)
        self.assertIs(get_catalog(), self.catalog)
