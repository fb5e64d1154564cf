# Standard Library
import os
import sys

# Third Party
import pytest


PACKAGE_PARTS = ("packages", "smilesdraw", "smilesdraw")


def pytest_addoption(parser):
	parser.addoption(
		"--save",
		action="store_true",
		default=False,
		help="Keep rendered SVG, PNG and PDF files in the current working directory",
	)


#============================================
@pytest.fixture
def output_dir(request, tmp_path):
	"""Directory rendered files go to; the working directory with --save."""
	if request.config.getoption("save"):
		return os.getcwd()
	return tmp_path


#============================================
def repo_root():
	# pytest may run from anywhere inside or outside the checkout
	for start_dir in (os.getcwd(), os.path.dirname(os.path.abspath(__file__))):
		root = _find_repo_root(start_dir)
		if root:
			return root
	raise RuntimeError("smilesdraw checkout not found above the working directory or tests/")


#============================================
def _find_repo_root(start_dir):
	current = os.path.abspath(start_dir)
	while not _is_smilesdraw_checkout(current):
		parent = os.path.dirname(current)
		if parent == current:
			return ""
		current = parent
	return current


#============================================
def _is_smilesdraw_checkout(path):
	return (os.path.isfile(os.path.join(path, "pyproject.toml"))
		and os.path.isdir(os.path.join(path, *PACKAGE_PARTS)))


#============================================
def add_smilesdraw_to_sys_path():
	root = repo_root()
	smilesdraw_dir = os.path.join(root, *PACKAGE_PARTS[:2])
	if smilesdraw_dir not in sys.path:
		sys.path.insert(0, smilesdraw_dir)
	return root
