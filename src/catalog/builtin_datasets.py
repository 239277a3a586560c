"""Built-in catalog of datasets hosted by the LIBSVM repository.

Rows are ``(name, remote_file, kind, rows, cols, classes)`` where
``classes`` is None for regression datasets.
"""

from __future__ import annotations

from core.types import DatasetDescriptor, DatasetKind

_BUILTIN_ROWS: tuple[tuple[str, str, DatasetKind, int, int, int | None], ...] = (
    ("a1a", "a1a", "binary", 1605, 123, 2),
    ("a1a.t", "a1a.t", "binary", 30956, 123, 2),
    ("a9a", "a9a", "binary", 32561, 123, 2),
    ("a9a.t", "a9a.t", "binary", 16281, 123, 2),
    ("australian", "australian", "binary", 690, 14, 2),
    ("breast-cancer", "breast-cancer", "binary", 683, 10, 2),
    ("cod-rna", "cod-rna", "binary", 59535, 8, 2),
    ("colon-cancer", "colon-cancer.bz2", "binary", 62, 2000, 2),
    ("covtype.binary", "covtype.libsvm.binary.bz2", "binary", 581012, 54, 2),
    ("diabetes", "diabetes", "binary", 768, 8, 2),
    ("duke", "duke.bz2", "binary", 44, 7129, 2),
    ("epsilon", "epsilon_normalized.bz2", "binary", 400000, 2000, 2),
    ("fourclass", "fourclass", "binary", 862, 2, 2),
    ("german.numer", "german.numer", "binary", 1000, 24, 2),
    ("gisette", "gisette_scale.bz2", "binary", 6000, 5000, 2),
    ("heart", "heart", "binary", 270, 13, 2),
    ("HIGGS", "HIGGS.xz", "binary", 11000000, 28, 2),
    ("ijcnn1", "ijcnn1.bz2", "binary", 49990, 22, 2),
    ("ionosphere", "ionosphere_scale", "binary", 351, 34, 2),
    ("leu", "leu.bz2", "binary", 38, 7129, 2),
    ("leu.t", "leu.t.bz2", "binary", 34, 7129, 2),
    ("madelon", "madelon", "binary", 2000, 500, 2),
    ("madelon.t", "madelon.t", "binary", 600, 500, 2),
    ("mushrooms", "mushrooms", "binary", 8124, 112, 2),
    ("news20.binary", "news20.binary.bz2", "binary", 19996, 1355191, 2),
    ("phishing", "phishing", "binary", 11055, 68, 2),
    ("rcv1.binary", "rcv1_train.binary.bz2", "binary", 20242, 47236, 2),
    ("real-sim", "real-sim.bz2", "binary", 72309, 20958, 2),
    ("skin_nonskin", "skin_nonskin", "binary", 245057, 3, 2),
    ("sonar", "sonar_scale", "binary", 208, 60, 2),
    ("splice", "splice", "binary", 1000, 60, 2),
    ("splice.t", "splice.t", "binary", 2175, 60, 2),
    ("SUSY", "SUSY.xz", "binary", 5000000, 18, 2),
    ("svmguide1", "svmguide1", "binary", 3089, 4, 2),
    ("w1a", "w1a", "binary", 2477, 300, 2),
    ("w8a", "w8a", "binary", 49749, 300, 2),
    ("w8a.t", "w8a.t", "binary", 14951, 300, 2),
    ("connect-4", "connect-4", "multiclass", 67557, 126, 3),
    ("covtype", "covtype.bz2", "multiclass", 581012, 54, 7),
    ("dna", "dna.scale", "multiclass", 2000, 180, 3),
    ("glass", "glass.scale", "multiclass", 214, 9, 6),
    ("iris", "iris.scale", "multiclass", 150, 4, 3),
    ("letter", "letter.scale", "multiclass", 15000, 16, 26),
    ("mnist", "mnist.bz2", "multiclass", 60000, 780, 10),
    ("mnist.t", "mnist.t.bz2", "multiclass", 10000, 780, 10),
    ("news20", "news20.bz2", "multiclass", 15935, 62061, 20),
    ("pendigits", "pendigits", "multiclass", 7494, 16, 10),
    ("rcv1.multiclass", "rcv1_train.multiclass.bz2", "multiclass", 15564, 47236, 53),
    ("satimage", "satimage.scale", "multiclass", 4435, 36, 6),
    ("sector", "sector.scale.bz2", "multiclass", 6412, 55197, 105),
    ("segment", "segment.scale", "multiclass", 2310, 19, 7),
    ("shuttle", "shuttle.scale", "multiclass", 43500, 9, 7),
    ("usps", "usps.bz2", "multiclass", 7291, 256, 10),
    ("usps.t", "usps.t.bz2", "multiclass", 2007, 256, 10),
    ("vehicle", "vehicle.scale", "multiclass", 846, 18, 4),
    ("vowel", "vowel.scale", "multiclass", 528, 10, 11),
    ("wine", "wine.scale", "multiclass", 178, 13, 3),
    ("abalone", "abalone", "regression", 4177, 8, None),
    ("bodyfat", "bodyfat", "regression", 252, 14, None),
    ("cadata", "cadata", "regression", 20640, 8, None),
    ("cpusmall", "cpusmall", "regression", 8192, 12, None),
    ("E2006.train", "E2006.train.bz2", "regression", 16087, 150360, None),
    ("E2006.test", "E2006.test.bz2", "regression", 3308, 150360, None),
    ("eunite2001", "eunite2001", "regression", 336, 16, None),
    ("housing", "housing", "regression", 506, 13, None),
    ("mg", "mg", "regression", 1385, 6, None),
    ("mpg", "mpg", "regression", 392, 7, None),
    ("pyrim", "pyrim", "regression", 74, 27, None),
    ("space_ga", "space_ga", "regression", 3107, 6, None),
    ("triazines", "triazines", "regression", 186, 60, None),
    ("YearPredictionMSD", "YearPredictionMSD.bz2", "regression", 463715, 90, None),
    ("YearPredictionMSD.t", "YearPredictionMSD.t.bz2", "regression", 51630, 90, None),
    ("rcv1v2.topics", "rcv1_topics_train.svm.bz2", "multilabel", 23149, 47236, 101),
    ("scene", "scene_train.bz2", "multilabel", 1211, 294, 6),
    ("scene.t", "scene_test.bz2", "multilabel", 1196, 294, 6),
    ("siam-competition2007", "tmc2007_train.svm.bz2", "multilabel", 21519, 30438, 22),
    ("yeast", "yeast_train.svm.bz2", "multilabel", 1500, 103, 14),
    ("yeast.t", "yeast_test.svm.bz2", "multilabel", 917, 103, 14),
)


def builtin_descriptors() -> tuple[DatasetDescriptor, ...]:
    """Return descriptors for every built-in dataset, in catalog order."""
    return tuple(
        DatasetDescriptor(
            name=name,
            remote_file=remote_file,
            kind=kind,
            declared_rows=rows,
            declared_cols=cols,
            declared_classes=classes,
        )
        for name, remote_file, kind, rows, cols, classes in _BUILTIN_ROWS
    )
