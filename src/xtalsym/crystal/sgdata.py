"""
Reference data for the 230 space groups, one row per International Tables
number, in the standard setting used throughout the library: unique axis b
for monoclinic groups, origin choice 1, and hexagonal axes (obverse) for the
rhombohedral groups.

Each row records the short and PDB-convention symbols, the point group,
crystal system and Laue class, the operator counts (total and per primitive
cell) and the Hall symbol the operators are expanded from.
"""
from collections import namedtuple

_sgdata = namedtuple(
    "_sgdata",
    "number short pdb pointgroup system laue nsym nprim hall",
)

SG_DATA = tuple(
    _sgdata._make(row)
    for row in (
        (1, "P1", "P 1", "1", "triclinic", "L111", 1, 1, "P 1"),
        (2, "P-1", "P -1", "-1", "triclinic", "L111", 2, 2, "-P 1"),
        (3, "P2", "P 1 2 1", "2", "monoclinic", "L121", 2, 2, "P 2y"),
        (4, "P21", "P 1 21 1", "2", "monoclinic", "L121", 2, 2, "P 2yb"),
        (5, "C2", "C 1 2 1", "2", "monoclinic", "L121", 4, 2, "C 2y"),
        (6, "Pm", "P 1 m 1", "m", "monoclinic", "L121", 2, 2, "P -2y"),
        (7, "Pc", "P 1 c 1", "m", "monoclinic", "L121", 2, 2, "P -2yc"),
        (8, "Cm", "C 1 m 1", "m", "monoclinic", "L121", 4, 2, "C -2y"),
        (9, "Cc", "C 1 c 1", "m", "monoclinic", "L121", 4, 2, "C -2yc"),
        (10, "P2/m", "P 1 2/m 1", "2/m", "monoclinic", "L121", 4, 4, "-P 2y"),
        (11, "P21/m", "P 1 21/m 1", "2/m", "monoclinic", "L121", 4, 4, "-P 2yb"),
        (12, "C2/m", "C 1 2/m 1", "2/m", "monoclinic", "L121", 8, 4, "-C 2y"),
        (13, "P2/c", "P 1 2/c 1", "2/m", "monoclinic", "L121", 4, 4, "-P 2yc"),
        (14, "P21/c", "P 1 21/c 1", "2/m", "monoclinic", "L121", 4, 4, "-P 2ybc"),
        (15, "C2/c", "C 1 2/c 1", "2/m", "monoclinic", "L121", 8, 4, "-C 2yc"),
        (16, "P222", "P 2 2 2", "222", "orthorhombic", "L222", 4, 4, "P 2 2"),
        (17, "P2221", "P 2 2 21", "222", "orthorhombic", "L222", 4, 4, "P 2c 2"),
        (18, "P21212", "P 21 21 2", "222", "orthorhombic", "L222", 4, 4, "P 2 2ab"),
        (19, "P212121", "P 21 21 21", "222", "orthorhombic", "L222", 4, 4, "P 2ac 2ab"),
        (20, "C2221", "C 2 2 21", "222", "orthorhombic", "L222", 8, 4, "C 2c 2"),
        (21, "C222", "C 2 2 2", "222", "orthorhombic", "L222", 8, 4, "C 2 2"),
        (22, "F222", "F 2 2 2", "222", "orthorhombic", "L222", 16, 4, "F 2 2"),
        (23, "I222", "I 2 2 2", "222", "orthorhombic", "L222", 8, 4, "I 2 2"),
        (24, "I212121", "I 21 21 21", "222", "orthorhombic", "L222", 8, 4, "I 2b 2c"),
        (25, "Pmm2", "P m m 2", "mm2", "orthorhombic", "L222", 4, 4, "P 2 -2"),
        (26, "Pmc21", "P m c 21", "mm2", "orthorhombic", "L222", 4, 4, "P 2c -2"),
        (27, "Pcc2", "P c c 2", "mm2", "orthorhombic", "L222", 4, 4, "P 2 -2c"),
        (28, "Pma2", "P m a 2", "mm2", "orthorhombic", "L222", 4, 4, "P 2 -2a"),
        (29, "Pca21", "P c a 21", "mm2", "orthorhombic", "L222", 4, 4, "P 2c -2ac"),
        (30, "Pnc2", "P n c 2", "mm2", "orthorhombic", "L222", 4, 4, "P 2 -2bc"),
        (31, "Pmn21", "P m n 21", "mm2", "orthorhombic", "L222", 4, 4, "P 2ac -2"),
        (32, "Pba2", "P b a 2", "mm2", "orthorhombic", "L222", 4, 4, "P 2 -2ab"),
        (33, "Pna21", "P n a 21", "mm2", "orthorhombic", "L222", 4, 4, "P 2c -2n"),
        (34, "Pnn2", "P n n 2", "mm2", "orthorhombic", "L222", 4, 4, "P 2 -2n"),
        (35, "Cmm2", "C m m 2", "mm2", "orthorhombic", "L222", 8, 4, "C 2 -2"),
        (36, "Cmc21", "C m c 21", "mm2", "orthorhombic", "L222", 8, 4, "C 2c -2"),
        (37, "Ccc2", "C c c 2", "mm2", "orthorhombic", "L222", 8, 4, "C 2 -2c"),
        (38, "Amm2", "A m m 2", "mm2", "orthorhombic", "L222", 8, 4, "A 2 -2"),
        (39, "Abm2", "A b m 2", "mm2", "orthorhombic", "L222", 8, 4, "A 2 -2c"),
        (40, "Ama2", "A m a 2", "mm2", "orthorhombic", "L222", 8, 4, "A 2 -2a"),
        (41, "Aba2", "A b a 2", "mm2", "orthorhombic", "L222", 8, 4, "A 2 -2ac"),
        (42, "Fmm2", "F m m 2", "mm2", "orthorhombic", "L222", 16, 4, "F 2 -2"),
        (43, "Fdd2", "F d d 2", "mm2", "orthorhombic", "L222", 16, 4, "F 2 -2d"),
        (44, "Imm2", "I m m 2", "mm2", "orthorhombic", "L222", 8, 4, "I 2 -2"),
        (45, "Iba2", "I b a 2", "mm2", "orthorhombic", "L222", 8, 4, "I 2 -2c"),
        (46, "Ima2", "I m a 2", "mm2", "orthorhombic", "L222", 8, 4, "I 2 -2a"),
        (47, "Pmmm", "P m m m", "mmm", "orthorhombic", "L222", 8, 8, "-P 2 2"),
        (48, "Pnnn", "P n n n", "mmm", "orthorhombic", "L222", 8, 8, "P 2 2 -1n"),
        (49, "Pccm", "P c c m", "mmm", "orthorhombic", "L222", 8, 8, "-P 2 2c"),
        (50, "Pban", "P b a n", "mmm", "orthorhombic", "L222", 8, 8, "P 2 2 -1ab"),
        (51, "Pmma", "P m m a", "mmm", "orthorhombic", "L222", 8, 8, "-P 2a 2a"),
        (52, "Pnna", "P n n a", "mmm", "orthorhombic", "L222", 8, 8, "-P 2a 2bc"),
        (53, "Pmna", "P m n a", "mmm", "orthorhombic", "L222", 8, 8, "-P 2ac 2"),
        (54, "Pcca", "P c c a", "mmm", "orthorhombic", "L222", 8, 8, "-P 2a 2ac"),
        (55, "Pbam", "P b a m", "mmm", "orthorhombic", "L222", 8, 8, "-P 2 2ab"),
        (56, "Pccn", "P c c n", "mmm", "orthorhombic", "L222", 8, 8, "-P 2ab 2ac"),
        (57, "Pbcm", "P b c m", "mmm", "orthorhombic", "L222", 8, 8, "-P 2c 2b"),
        (58, "Pnnm", "P n n m", "mmm", "orthorhombic", "L222", 8, 8, "-P 2 2n"),
        (59, "Pmmn", "P m m n", "mmm", "orthorhombic", "L222", 8, 8, "P 2 2ab -1ab"),
        (60, "Pbcn", "P b c n", "mmm", "orthorhombic", "L222", 8, 8, "-P 2n 2ab"),
        (61, "Pbca", "P b c a", "mmm", "orthorhombic", "L222", 8, 8, "-P 2ac 2ab"),
        (62, "Pnma", "P n m a", "mmm", "orthorhombic", "L222", 8, 8, "-P 2ac 2n"),
        (63, "Cmcm", "C m c m", "mmm", "orthorhombic", "L222", 16, 8, "-C 2c 2"),
        (64, "Cmca", "C m c a", "mmm", "orthorhombic", "L222", 16, 8, "-C 2bc 2"),
        (65, "Cmmm", "C m m m", "mmm", "orthorhombic", "L222", 16, 8, "-C 2 2"),
        (66, "Cccm", "C c c m", "mmm", "orthorhombic", "L222", 16, 8, "-C 2 2c"),
        (67, "Cmma", "C m m a", "mmm", "orthorhombic", "L222", 16, 8, "-C 2b 2"),
        (68, "Ccca", "C c c a", "mmm", "orthorhombic", "L222", 16, 8, "C 2 2 -1bc"),
        (69, "Fmmm", "F m m m", "mmm", "orthorhombic", "L222", 32, 8, "-F 2 2"),
        (70, "Fddd", "F d d d", "mmm", "orthorhombic", "L222", 32, 8, "F 2 2 -1d"),
        (71, "Immm", "I m m m", "mmm", "orthorhombic", "L222", 16, 8, "-I 2 2"),
        (72, "Ibam", "I b a m", "mmm", "orthorhombic", "L222", 16, 8, "-I 2 2c"),
        (73, "Ibca", "I b c a", "mmm", "orthorhombic", "L222", 16, 8, "-I 2b 2c"),
        (74, "Imma", "I m m a", "mmm", "orthorhombic", "L222", 16, 8, "-I 2b 2"),
        (75, "P4", "P 4", "4", "tetragonal", "L114", 4, 4, "P 4"),
        (76, "P41", "P 41", "4", "tetragonal", "L114", 4, 4, "P 4w"),
        (77, "P42", "P 42", "4", "tetragonal", "L114", 4, 4, "P 4c"),
        (78, "P43", "P 43", "4", "tetragonal", "L114", 4, 4, "P 4cw"),
        (79, "I4", "I 4", "4", "tetragonal", "L114", 8, 4, "I 4"),
        (80, "I41", "I 41", "4", "tetragonal", "L114", 8, 4, "I 4bw"),
        (81, "P-4", "P -4", "-4", "tetragonal", "L114", 4, 4, "P -4"),
        (82, "I-4", "I -4", "-4", "tetragonal", "L114", 8, 4, "I -4"),
        (83, "P4/m", "P 4/m", "4/m", "tetragonal", "L114", 8, 8, "-P 4"),
        (84, "P42/m", "P 42/m", "4/m", "tetragonal", "L114", 8, 8, "-P 4c"),
        (85, "P4/n", "P 4/n", "4/m", "tetragonal", "L114", 8, 8, "P 4ab -1ab"),
        (86, "P42/n", "P 42/n", "4/m", "tetragonal", "L114", 8, 8, "P 4n -1n"),
        (87, "I4/m", "I 4/m", "4/m", "tetragonal", "L114", 16, 8, "-I 4"),
        (88, "I41/a", "I 41/a", "4/m", "tetragonal", "L114", 16, 8, "I 4bw -1bw"),
        (89, "P422", "P 4 2 2", "422", "tetragonal", "L224", 8, 8, "P 4 2"),
        (90, "P4212", "P 4 21 2", "422", "tetragonal", "L224", 8, 8, "P 4ab 2ab"),
        (91, "P4122", "P 41 2 2", "422", "tetragonal", "L224", 8, 8, "P 4w 2c"),
        (92, "P41212", "P 41 21 2", "422", "tetragonal", "L224", 8, 8, "P 4abw 2nw"),
        (93, "P4222", "P 42 2 2", "422", "tetragonal", "L224", 8, 8, "P 4c 2"),
        (94, "P42212", "P 42 21 2", "422", "tetragonal", "L224", 8, 8, "P 4n 2n"),
        (95, "P4322", "P 43 2 2", "422", "tetragonal", "L224", 8, 8, "P 4cw 2c"),
        (96, "P43212", "P 43 21 2", "422", "tetragonal", "L224", 8, 8, "P 4nw 2abw"),
        (97, "I422", "I 4 2 2", "422", "tetragonal", "L224", 16, 8, "I 4 2"),
        (98, "I4122", "I 41 2 2", "422", "tetragonal", "L224", 16, 8, "I 4bw 2bw"),
        (99, "P4mm", "P 4 m m", "4mm", "tetragonal", "L224", 8, 8, "P 4 -2"),
        (100, "P4bm", "P 4 b m", "4mm", "tetragonal", "L224", 8, 8, "P 4 -2ab"),
        (101, "P42cm", "P 42 c m", "4mm", "tetragonal", "L224", 8, 8, "P 4c -2c"),
        (102, "P42nm", "P 42 n m", "4mm", "tetragonal", "L224", 8, 8, "P 4n -2n"),
        (103, "P4cc", "P 4 c c", "4mm", "tetragonal", "L224", 8, 8, "P 4 -2c"),
        (104, "P4nc", "P 4 n c", "4mm", "tetragonal", "L224", 8, 8, "P 4 -2n"),
        (105, "P42mc", "P 42 m c", "4mm", "tetragonal", "L224", 8, 8, "P 4c -2"),
        (106, "P42bc", "P 42 b c", "4mm", "tetragonal", "L224", 8, 8, "P 4c -2ab"),
        (107, "I4mm", "I 4 m m", "4mm", "tetragonal", "L224", 16, 8, "I 4 -2"),
        (108, "I4cm", "I 4 c m", "4mm", "tetragonal", "L224", 16, 8, "I 4 -2c"),
        (109, "I41md", "I 41 m d", "4mm", "tetragonal", "L224", 16, 8, "I 4bw -2"),
        (110, "I41cd", "I 41 c d", "4mm", "tetragonal", "L224", 16, 8, "I 4bw -2c"),
        (111, "P-42m", "P -4 2 m", "-42m", "tetragonal", "L224", 8, 8, "P -4 2"),
        (112, "P-42c", "P -4 2 c", "-42m", "tetragonal", "L224", 8, 8, "P -4 2c"),
        (113, "P-421m", "P -4 21 m", "-42m", "tetragonal", "L224", 8, 8, "P -4 2ab"),
        (114, "P-421c", "P -4 21 c", "-42m", "tetragonal", "L224", 8, 8, "P -4 2n"),
        (115, "P-4m2", "P -4 m 2", "-4m2", "tetragonal", "L224", 8, 8, "P -4 -2"),
        (116, "P-4c2", "P -4 c 2", "-4m2", "tetragonal", "L224", 8, 8, "P -4 -2c"),
        (117, "P-4b2", "P -4 b 2", "-4m2", "tetragonal", "L224", 8, 8, "P -4 -2ab"),
        (118, "P-4n2", "P -4 n 2", "-4m2", "tetragonal", "L224", 8, 8, "P -4 -2n"),
        (119, "I-4m2", "I -4 m 2", "-4m2", "tetragonal", "L224", 16, 8, "I -4 -2"),
        (120, "I-4c2", "I -4 c 2", "-4m2", "tetragonal", "L224", 16, 8, "I -4 -2c"),
        (121, "I-42m", "I -4 2 m", "-42m", "tetragonal", "L224", 16, 8, "I -4 2"),
        (122, "I-42d", "I -4 2 d", "-42m", "tetragonal", "L224", 16, 8, "I -4 2bw"),
        (123, "P4/mmm", "P 4/m m m", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4 2"),
        (124, "P4/mcc", "P 4/m c c", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4 2c"),
        (125, "P4/nbm", "P 4/n b m", "4/mmm", "tetragonal", "L224", 16, 16, "P 4 2 -1ab"),
        (126, "P4/nnc", "P 4/n n c", "4/mmm", "tetragonal", "L224", 16, 16, "P 4 2 -1n"),
        (127, "P4/mbm", "P 4/m b m", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4 2ab"),
        (128, "P4/mnc", "P 4/m n c", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4 2n"),
        (129, "P4/nmm", "P 4/n m m", "4/mmm", "tetragonal", "L224", 16, 16, "P 4ab 2ab -1ab"),
        (130, "P4/ncc", "P 4/n c c", "4/mmm", "tetragonal", "L224", 16, 16, "P 4ab 2n -1ab"),
        (131, "P42/mmc", "P 42/m m c", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4c 2"),
        (132, "P42/mcm", "P 42/m c m", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4c 2c"),
        (133, "P42/nbc", "P 42/n b c", "4/mmm", "tetragonal", "L224", 16, 16, "P 4n 2c -1n"),
        (134, "P42/nnm", "P 42/n n m", "4/mmm", "tetragonal", "L224", 16, 16, "P 4n 2 -1n"),
        (135, "P42/mbc", "P 42/m b c", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4c 2ab"),
        (136, "P42/mnm", "P 42/m n m", "4/mmm", "tetragonal", "L224", 16, 16, "-P 4n 2n"),
        (137, "P42/nmc", "P 42/n m c", "4/mmm", "tetragonal", "L224", 16, 16, "P 4n 2n -1n"),
        (138, "P42/ncm", "P 42/n c m", "4/mmm", "tetragonal", "L224", 16, 16, "P 4n 2ab -1n"),
        (139, "I4/mmm", "I 4/m m m", "4/mmm", "tetragonal", "L224", 32, 16, "-I 4 2"),
        (140, "I4/mcm", "I 4/m c m", "4/mmm", "tetragonal", "L224", 32, 16, "-I 4 2c"),
        (141, "I41/amd", "I 41/a m d", "4/mmm", "tetragonal", "L224", 32, 16, "I 4bw 2bw -1bw"),
        (142, "I41/acd", "I 41/a c d", "4/mmm", "tetragonal", "L224", 32, 16, "I 4bw 2aw -1bw"),
        (143, "P3", "P 3", "3", "trigonal", "L113", 3, 3, "P 3"),
        (144, "P31", "P 31", "3", "trigonal", "L113", 3, 3, "P 31"),
        (145, "P32", "P 32", "3", "trigonal", "L113", 3, 3, "P 32"),
        (146, "R3", "H 3", "3", "trigonal", "L113", 9, 3, "R 3"),
        (147, "P-3", "P -3", "-3", "trigonal", "L113", 6, 6, "-P 3"),
        (148, "R-3", "H -3", "-3", "trigonal", "L113", 18, 6, "-R 3"),
        (149, "P312", "P 3 1 2", "312", "trigonal", "L223", 6, 6, "P 3 2"),
        (150, "P321", "P 3 2 1", "321", "trigonal", "L32U", 6, 6, 'P 3 2"'),
        (151, "P3112", "P 31 1 2", "312", "trigonal", "L223", 6, 6, "P 31 2c (0 0 1)"),
        (152, "P3121", "P 31 2 1", "321", "trigonal", "L32U", 6, 6, 'P 31 2"'),
        (153, "P3212", "P 32 1 2", "312", "trigonal", "L223", 6, 6, "P 32 2c (0 0 -1)"),
        (154, "P3221", "P 32 2 1", "321", "trigonal", "L32U", 6, 6, 'P 32 2"'),
        (155, "R32", "H 3 2", "32", "trigonal", "L32U", 18, 6, 'R 3 2"'),
        (156, "P3m1", "P 3 m 1", "3m1", "trigonal", "L32U", 6, 6, 'P 3 -2"'),
        (157, "P31m", "P 3 1 m", "31m", "trigonal", "L223", 6, 6, "P 3 -2"),
        (158, "P3c1", "P 3 c 1", "3m1", "trigonal", "L32U", 6, 6, 'P 3 -2"c'),
        (159, "P31c", "P 3 1 c", "31m", "trigonal", "L223", 6, 6, "P 3 -2c"),
        (160, "R3m", "H 3 m", "3m", "trigonal", "L32U", 18, 6, 'R 3 -2"'),
        (161, "R3c", "H 3 c", "3m", "trigonal", "L32U", 18, 6, 'R 3 -2"c'),
        (162, "P-31m", "P -3 1 m", "-31m", "trigonal", "L223", 12, 12, "-P 3 2"),
        (163, "P-31c", "P -3 1 c", "-31m", "trigonal", "L223", 12, 12, "-P 3 2c"),
        (164, "P-3m1", "P -3 m 1", "-3m1", "trigonal", "L32U", 12, 12, '-P 3 2"'),
        (165, "P-3c1", "P -3 c 1", "-3m1", "trigonal", "L32U", 12, 12, '-P 3 2"c'),
        (166, "R-3m", "H -3 m", "-3m", "trigonal", "L32U", 36, 12, '-R 3 2"'),
        (167, "R-3c", "H -3 c", "-3m", "trigonal", "L32U", 36, 12, '-R 3 2"c'),
        (168, "P6", "P 6", "6", "hexagonal", "L114", 6, 6, "P 6"),
        (169, "P61", "P 61", "6", "hexagonal", "L114", 6, 6, "P 61"),
        (170, "P65", "P 65", "6", "hexagonal", "L114", 6, 6, "P 65"),
        (171, "P62", "P 62", "6", "hexagonal", "L114", 6, 6, "P 62"),
        (172, "P64", "P 64", "6", "hexagonal", "L114", 6, 6, "P 64"),
        (173, "P63", "P 63", "6", "hexagonal", "L114", 6, 6, "P 6c"),
        (174, "P-6", "P -6", "-6", "hexagonal", "L114", 6, 6, "P -6"),
        (175, "P6/m", "P 6/m", "6/m", "hexagonal", "L114", 12, 12, "-P 6"),
        (176, "P63/m", "P 63/m", "6/m", "hexagonal", "L114", 12, 12, "-P 6c"),
        (177, "P622", "P 6 2 2", "622", "hexagonal", "L224", 12, 12, "P 6 2"),
        (178, "P6122", "P 61 2 2", "622", "hexagonal", "L224", 12, 12, "P 61 2 (0 0 -1)"),
        (179, "P6522", "P 65 2 2", "622", "hexagonal", "L224", 12, 12, "P 65 2 (0 0 1)"),
        (180, "P6222", "P 62 2 2", "622", "hexagonal", "L224", 12, 12, "P 62 2c (0 0 1)"),
        (181, "P6422", "P 64 2 2", "622", "hexagonal", "L224", 12, 12, "P 64 2c (0 0 -1)"),
        (182, "P6322", "P 63 2 2", "622", "hexagonal", "L224", 12, 12, "P 6c 2c"),
        (183, "P6mm", "P 6 m m", "6mm", "hexagonal", "L224", 12, 12, "P 6 -2"),
        (184, "P6cc", "P 6 c c", "6mm", "hexagonal", "L224", 12, 12, "P 6 -2c"),
        (185, "P63cm", "P 63 c m", "6mm", "hexagonal", "L224", 12, 12, "P 6c -2"),
        (186, "P63mc", "P 63 m c", "6mm", "hexagonal", "L224", 12, 12, "P 6c -2c"),
        (187, "P-6m2", "P -6 m 2", "-6m2", "hexagonal", "L224", 12, 12, "P -6 2"),
        (188, "P-6c2", "P -6 c 2", "-6m2", "hexagonal", "L224", 12, 12, "P -6c 2"),
        (189, "P-62m", "P -6 2 m", "-62m", "hexagonal", "L224", 12, 12, "P -6 -2"),
        (190, "P-62c", "P -6 2 c", "-62m", "hexagonal", "L224", 12, 12, "P -6c -2c"),
        (191, "P6/mmm", "P 6/m m m", "6/mmm", "hexagonal", "L224", 24, 24, "-P 6 2"),
        (192, "P6/mcc", "P 6/m c c", "6/mmm", "hexagonal", "L224", 24, 24, "-P 6 2c"),
        (193, "P63/mcm", "P 63/m c m", "6/mmm", "hexagonal", "L224", 24, 24, "-P 6c 2"),
        (194, "P63/mmc", "P 63/m m c", "6/mmm", "hexagonal", "L224", 24, 24, "-P 6c 2c"),
        (195, "P23", "P 2 3", "23", "cubic", "LM3B", 12, 12, "P 2 2 3"),
        (196, "F23", "F 2 3", "23", "cubic", "LM3B", 48, 12, "F 2 2 3"),
        (197, "I23", "I 2 3", "23", "cubic", "LM3B", 24, 12, "I 2 2 3"),
        (198, "P213", "P 21 3", "23", "cubic", "LM3B", 12, 12, "P 2ac 2ab 3"),
        (199, "I213", "I 21 3", "23", "cubic", "LM3B", 24, 12, "I 2b 2c 3"),
        (200, "Pm-3", "P m -3", "m-3", "cubic", "LM3B", 24, 24, "-P 2 2 3"),
        (201, "Pn-3", "P n -3", "m-3", "cubic", "LM3B", 24, 24, "P 2 2 3 -1n"),
        (202, "Fm-3", "F m -3", "m-3", "cubic", "LM3B", 96, 24, "-F 2 2 3"),
        (203, "Fd-3", "F d -3", "m-3", "cubic", "LM3B", 96, 24, "F 2 2 3 -1d"),
        (204, "Im-3", "I m -3", "m-3", "cubic", "LM3B", 48, 24, "-I 2 2 3"),
        (205, "Pa-3", "P a -3", "m-3", "cubic", "LM3B", 24, 24, "-P 2ac 2ab 3"),
        (206, "Ia-3", "I a -3", "m-3", "cubic", "LM3B", 48, 24, "-I 2b 2c 3"),
        (207, "P432", "P 4 3 2", "432", "cubic", "LM3M", 24, 24, "P 4 2 3"),
        (208, "P4232", "P 42 3 2", "432", "cubic", "LM3M", 24, 24, "P 4n 2 3"),
        (209, "F432", "F 4 3 2", "432", "cubic", "LM3M", 96, 24, "F 4 2 3"),
        (210, "F4132", "F 41 3 2", "432", "cubic", "LM3M", 96, 24, "F 4d 2 3"),
        (211, "I432", "I 4 3 2", "432", "cubic", "LM3M", 48, 24, "I 4 2 3"),
        (212, "P4332", "P 43 3 2", "432", "cubic", "LM3M", 24, 24, "P 4acd 2ab 3"),
        (213, "P4132", "P 41 3 2", "432", "cubic", "LM3M", 24, 24, "P 4bd 2ab 3"),
        (214, "I4132", "I 41 3 2", "432", "cubic", "LM3M", 48, 24, "I 4bd 2c 3"),
        (215, "P-43m", "P -4 3 m", "-43m", "cubic", "LM3M", 24, 24, "P -4 2 3"),
        (216, "F-43m", "F -4 3 m", "-43m", "cubic", "LM3M", 96, 24, "F -4 2 3"),
        (217, "I-43m", "I -4 3 m", "-43m", "cubic", "LM3M", 48, 24, "I -4 2 3"),
        (218, "P-43n", "P -4 3 n", "-43m", "cubic", "LM3M", 24, 24, "P -4n 2 3"),
        (219, "F-43c", "F -4 3 c", "-43m", "cubic", "LM3M", 96, 24, "F -4c 2 3"),
        (220, "I-43d", "I -4 3 d", "-43m", "cubic", "LM3M", 48, 24, "I -4bd 2c 3"),
        (221, "Pm-3m", "P m -3 m", "m-3m", "cubic", "LM3M", 48, 48, "-P 4 2 3"),
        (222, "Pn-3n", "P n -3 n", "m-3m", "cubic", "LM3M", 48, 48, "P 4 2 3 -1n"),
        (223, "Pm-3n", "P m -3 n", "m-3m", "cubic", "LM3M", 48, 48, "-P 4n 2 3"),
        (224, "Pn-3m", "P n -3 m", "m-3m", "cubic", "LM3M", 48, 48, "P 4n 2 3 -1n"),
        (225, "Fm-3m", "F m -3 m", "m-3m", "cubic", "LM3M", 192, 48, "-F 4 2 3"),
        (226, "Fm-3c", "F m -3 c", "m-3m", "cubic", "LM3M", 192, 48, "-F 4c 2 3"),
        (227, "Fd-3m", "F d -3 m", "m-3m", "cubic", "LM3M", 192, 48, "F 4d 2 3 -1d"),
        (228, "Fd-3c", "F d -3 c", "m-3m", "cubic", "LM3M", 192, 48, "F 4d 2 3 -1cd"),
        (229, "Im-3m", "I m -3 m", "m-3m", "cubic", "LM3M", 96, 48, "-I 4 2 3"),
        (230, "Ia-3d", "I a -3 d", "m-3m", "cubic", "LM3M", 96, 48, "-I 4bd 2c 3"),
    )
)
