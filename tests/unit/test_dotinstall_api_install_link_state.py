"""Unit tests for dotinstall.api.install.link_state module."""

import os

import pytest

from dotinstall.api.install.link_state import link_state
from dotinstall.api.install.LinkState import LinkState

pytestmark = pytest.mark.install


def test_absent(tmp_path, dotfiles_repo):
    assert link_state(dotfiles_repo / "vimrc", tmp_path / ".vimrc") is LinkState.ABSENT


def test_regular_file(tmp_path, dotfiles_repo):
    new = tmp_path / ".vimrc"
    new.write_text("local\n")
    assert link_state(dotfiles_repo / "vimrc", new) is LinkState.ENTRY


def test_directory(tmp_path, dotfiles_repo):
    new = tmp_path / "nvim"
    new.mkdir()
    assert link_state(dotfiles_repo / "nvim", new) is LinkState.ENTRY


def test_link_to_same_target(tmp_path, dotfiles_repo):
    new = tmp_path / ".vimrc"
    new.symlink_to(dotfiles_repo / "vimrc")
    assert link_state(dotfiles_repo / "vimrc", new) is LinkState.SAME_LINK


def test_relative_link_to_same_target(tmp_path, dotfiles_repo):
    new = tmp_path / ".vimrc"
    new.symlink_to(os.path.relpath(dotfiles_repo / "vimrc", tmp_path))
    assert link_state(dotfiles_repo / "vimrc", new) is LinkState.SAME_LINK


def test_chained_link_to_same_target(tmp_path, dotfiles_repo):
    middle = tmp_path / "middle"
    middle.symlink_to(dotfiles_repo / "vimrc")
    new = tmp_path / ".vimrc"
    new.symlink_to(middle)
    assert link_state(dotfiles_repo / "vimrc", new) is LinkState.SAME_LINK


def test_link_to_other_target(tmp_path, dotfiles_repo):
    new = tmp_path / ".vimrc"
    new.symlink_to(dotfiles_repo / "gitconfig")
    assert link_state(dotfiles_repo / "vimrc", new) is LinkState.OTHER_LINK


def test_broken_link(tmp_path, dotfiles_repo):
    new = tmp_path / ".vimrc"
    new.symlink_to(tmp_path / "missing")
    assert link_state(dotfiles_repo / "vimrc", new) is LinkState.OTHER_LINK


def test_existing_given_through_link_matches(tmp_path, dotfiles_repo):
    alias = tmp_path / "alias"
    alias.symlink_to(dotfiles_repo)
    new = tmp_path / ".vimrc"
    new.symlink_to(dotfiles_repo / "vimrc")
    assert link_state(alias / "vimrc", new) is LinkState.SAME_LINK
