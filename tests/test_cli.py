from __future__ import annotations

import pytest

from face_runner import __version__
from face_runner.__main__ import _build_provider, build_parser, main
from face_runner.input_providers.keyboard import KeyboardProvider


def test_version(capsys):
    main(["--version"])
    assert capsys.readouterr().out.strip() == __version__


def test_keyboard_provider_spec():
    assert isinstance(_build_provider("keyboard"), KeyboardProvider)


@pytest.mark.parametrize("spec", ["gamepad", "expression:front"])
def test_bad_provider_spec_exits(spec):
    with pytest.raises(SystemExit):
        _build_provider(spec)


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.provider is None
    assert args.scale == 1
    assert args.seed is None
