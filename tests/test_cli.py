from avlkit.cli import EMPTY_REPORT, build_demo_tree, demo_report, main
from avlkit.tree import AVLTree

DEMO = [20, 9, 50, 7, 12, 25, 65]


def test_build_demo_tree():
    tree = build_demo_tree()
    assert list(tree) == sorted(DEMO)
    assert tree.is_balanced()


def test_demo_report_contents():
    tree = build_demo_tree()
    report = demo_report(tree)
    assert f"Sum of all values: {sum(DEMO)}" in report
    assert f"Number of nodes: {len(DEMO)}" in report
    assert tree.render().rstrip("\n") in report
    assert report.endswith("The tree is balanced.")
    assert f"Minimum: {min(DEMO)}" in report
    assert f"Maximum: {max(DEMO)}" in report


def test_demo_report_empty_tree():
    assert demo_report(AVLTree()) == EMPTY_REPORT


def test_demo_report_missing_keys():
    report = demo_report(AVLTree([1, 2]))
    assert "Level of 9: not found" in report
    assert "Same level (20 and 20): no" in report
    assert "k-th smallest (1 to 2):" in report


def test_main_without_arguments(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == demo_report(build_demo_tree()) + "\n"


def test_main_with_keys(capsys):
    assert main(["5", "3", "8", "3"]) == 0
    out = capsys.readouterr().out
    assert out == demo_report(AVLTree([5, 3, 8])) + "\n"
    assert "Number of nodes: 3" in out