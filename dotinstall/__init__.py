"""dotinstall - link dotfiles into place and append shell-init snippets."""
