import logging
import unittest
from fractions import Fraction
import numpy as np
from xtalsym.crystal import SymmetryOperation, compose
from xtalsym.crystal.symmetry_operation import (
    decode_symm_str,
    encode_symm_int,
    generate_group,
)

LOG = logging.getLogger(__name__)

P212121 = ("+x,+y,+z", "1/2-x,-y,1/2+z", "1/2+x,1/2-y,-z", "-x,1/2+y,1/2-z")


class SymmetryOperationTestCase(unittest.TestCase):
    identity = SymmetryOperation.from_integer_code(16484)

    def test_seitz(self):
        s = self.identity.seitz_matrix
        expected = np.eye(4)
        np.testing.assert_allclose(s, expected)
        op = SymmetryOperation.from_string_code("-y,x-y,z+2/3")
        np.testing.assert_allclose(op.seitz_matrix[:3, 3], [0, 0, 2 / 3])
        np.testing.assert_array_equal(
            op.rotation_matrix, [[0, -1, 0], [1, -1, 0], [0, 0, 1]]
        )

    def test_cif_form(self):
        self.assertEqual(self.identity.cif_form, "+x,+y,+z")
        inv = self.identity.inverted()
        self.assertEqual(inv.cif_form, "-x,-y,-z")
        inv += (0.5, 0.0, 0.0)
        self.assertEqual(inv.cif_form, "1/2-x,-y,-z")
        inv -= (0.5, 0.0, 0.0)
        self.assertEqual(inv.cif_form, "-x,-y,-z")

    def test_repr(self):
        self.assertEqual(repr(self.identity), "<SymmetryOperation: +x,+y,+z>")

    def test_apply(self):
        pts_seitz = np.random.rand(100, 4)
        pts_seitz[:, 3] = 1
        np.testing.assert_allclose(pts_seitz, self.identity(pts_seitz))
        pts = np.random.rand(100, 3)
        inv = self.identity.inverted()
        np.testing.assert_allclose(-pts, inv.apply_array(pts))

    def test_apply_is_exact(self):
        op = SymmetryOperation.from_string_code("1/2-x,-y,1/2+z")
        result = op.apply((Fraction(1, 4), 0, Fraction(3, 4)))
        # no reduction into the unit cell
        self.assertEqual(result, (Fraction(1, 4), 0, Fraction(5, 4)))
        self.assertEqual(op((1, 1, 1)), (Fraction(-1, 2), -1, Fraction(3, 2)))

    def test_ordering(self):
        inv = self.identity.inverted()
        self.assertLess(inv, self.identity)
        self.assertEqual(sorted([self.identity, inv])[0], inv)

    def test_equality_and_hash(self):
        a = SymmetryOperation.from_string_code("-x,-y,z+1/2")
        b = SymmetryOperation(((-1, 0, 0), (0, -1, 0), (0, 0, 1)), (0, 0, 0.5))
        self.assertEqual(a, b)
        self.assertEqual(len({a, b, self.identity}), 2)
        self.assertNotEqual(a, a + (1, 0, 0))
        self.assertEqual(a, (a + (1, 0, 0)).reduced())

    def test_determinant(self):
        self.assertEqual(self.identity.determinant, 1)
        self.assertEqual(self.identity.inverted().determinant, -1)
        mirror = SymmetryOperation.from_string_code("x,-y,z")
        self.assertEqual(mirror.determinant, -1)

    def test_integer_code(self):
        self.assertEqual(self.identity.integer_code, 16484)
        op = SymmetryOperation.from_string_code("-x+1/2,-y,z+1/2")
        self.assertEqual(op.integer_code, 136288292)
        self.assertEqual(SymmetryOperation.from_integer_code(op.integer_code), op)
        with self.assertRaises(ValueError):
            encode_symm_int(op.rotation, (Fraction(1, 5), 0, 0))

    def test_string_code(self):
        op = SymmetryOperation.from_string_code(" x-y, -y+1/2 , 0.25+z")
        self.assertEqual(op.rotation, ((1, -1, 0), (0, -1, 0), (0, 0, 1)))
        self.assertEqual(op.translation, (0, Fraction(1, 2), Fraction(1, 4)))
        self.assertEqual(str(op), "+x-y,1/2-y,1/4+z")
        rotation, translation = decode_symm_str("-x-1/2,y,z")
        self.assertEqual(translation, (Fraction(1, 2), 0, 0))
        self.assertEqual(SymmetryOperation.from_string_code("X,Y,Z"), self.identity)

    def test_invalid_string_code(self):
        malformed = ("x,y", "x,y,q", "x,,z", "x,y,z,x", "x+*,y,z")
        # terms must be joined by a sign
        malformed += ("2x,y,z", "x1/2,y,z", "1/2x,y,z")
        for code in malformed:
            with self.assertRaises(ValueError):
                SymmetryOperation.from_string_code(code)

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            SymmetryOperation(((1, 0), (0, 1)))
        with self.assertRaises(ValueError):
            SymmetryOperation(((1, 0, 0), (0, 1, 0), (0, 0, 1)), (0, 0))
        with self.assertRaises(ValueError):
            SymmetryOperation(((0.5, 0, 0), (0, 1, 0), (0, 0, 1)))

    def test_inexact_float_translation(self):
        with self.assertRaises(ValueError):
            self.identity + (0.123, 0, 0)
        with self.assertRaises(ValueError):
            SymmetryOperation.identity() + (1 / 7, 0, 0)
        op = self.identity + (0.25, 1 / 3, 0.125)
        self.assertEqual(
            op.translation, (Fraction(1, 4), Fraction(1, 3), Fraction(1, 8))
        )

    def test_rotate_hkl(self):
        three_fold = SymmetryOperation.from_string_code("-y,x-y,z")
        self.assertEqual(three_fold.rotate_hkl((1, 0, 0)), (0, -1, 0))
        self.assertEqual(three_fold.rotate_hkl((0, -1, 0)), (-1, 1, 0))
        self.assertEqual(three_fold.rotate_hkl((-1, 1, 0)), (1, 0, 0))
        screw = SymmetryOperation.from_string_code("-x,-y,z+1/2")
        self.assertEqual(screw.rotate_hkl((1, 2, 3)), (-1, -2, 3))

    def test_compose(self):
        a = SymmetryOperation.from_string_code(P212121[1])
        b = SymmetryOperation.from_string_code(P212121[2])
        ab = compose(a, b)
        self.assertEqual(ab.rotation, ((-1, 0, 0), (0, 1, 0), (0, 0, -1)))
        self.assertEqual(ab.translation, (0, Fraction(-1, 2), Fraction(1, 2)))
        self.assertEqual(ab.reduced(), SymmetryOperation.from_string_code(P212121[3]))
        self.assertEqual(a @ b, ab)
        self.assertEqual(compose(a, self.identity), a)
        self.assertEqual(compose(self.identity, a), a)

    def test_compose_order(self):
        point = (Fraction(1, 8), Fraction(1, 3), Fraction(3, 4))
        a = SymmetryOperation.from_string_code("-y,x-y,z+1/3")
        b = SymmetryOperation.from_string_code("y,x,-z")
        self.assertEqual(compose(a, b).apply(point), a.apply(b.apply(point)))
        self.assertNotEqual(compose(a, b), compose(b, a))

    def test_inverted_is_involution(self):
        op = SymmetryOperation.from_string_code("1/4-y,3/4+x,1/4+z")
        self.assertEqual(op.inverted().inverted(), op)


class GenerateGroupTestCase(unittest.TestCase):
    def test_primitive(self):
        generators = [SymmetryOperation.from_string_code(x) for x in P212121[1:3]]
        symops = generate_group(generators)
        self.assertTrue(symops[0].is_identity())
        self.assertEqual(
            set(symops), {SymmetryOperation.from_string_code(x) for x in P212121}
        )

    def test_centering(self):
        four_fold = SymmetryOperation.from_string_code("-y,x,z")
        symops = generate_group([four_fold], centering=[(0.5, 0.5, 0.5)])
        self.assertEqual(len(symops), 8)
        self.assertTrue(symops[0].is_identity())
        self.assertEqual(symops[4], SymmetryOperation.from_string_code("x+1/2,y+1/2,z+1/2"))
        self.assertEqual(len({s.rotation for s in symops}), 4)

    def test_inconsistent_generators(self):
        with self.assertRaises(ValueError):
            generate_group([SymmetryOperation.from_string_code("x+1/4,y,z")])
