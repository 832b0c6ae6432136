import logging

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from bezier_elevation import CurveEditor, EditorConfig, Point


@pytest.fixture
def editor():
    return CurveEditor(EditorConfig())


@pytest.fixture
def triangle():
    return (Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0))


@pytest.fixture
def wavy():
    return (
        Point(12.0, 400.0),
        Point(180.0, 35.0),
        Point(420.0, 610.0),
        Point(515.5, 80.25),
        Point(900.0, 333.0),
    )


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture(autouse=True)
def reset_package_logger():
    yield
    logger = logging.getLogger("bezier_elevation")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
