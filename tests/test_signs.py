from arboles.signs import SIGNS, build_sign_tree, main, report


def test_tree_holds_every_sign_in_order():
    signs_tree = build_sign_tree(SIGNS)
    assert list(signs_tree) == sorted(SIGNS)
    assert len(signs_tree) == len(SIGNS)


def test_first_sign_is_root():
    signs_tree = build_sign_tree(SIGNS)
    assert signs_tree.root.value == "piscis"


def test_extremes():
    signs_tree = build_sign_tree(SIGNS)
    assert signs_tree.maximum() == "virgo"
    assert signs_tree.minimum() == "acuario"


def test_duplicates_kept_once():
    signs_tree = build_sign_tree(["leo", "aries", "leo"])
    assert list(signs_tree) == ["aries", "leo"]


def test_report_sections():
    text = report(build_sign_tree(SIGNS))
    assert text.startswith("\nÁrbol (vista en consola):\n")
    assert "\npiscis\n" in text
    assert "\nRecorrido Inorden:\n\n" + "".join(f"{s}-" for s in sorted(SIGNS)) + "\n" in text
    assert text.endswith("\nMAXIMO: virgo\n\n\nMINIMO: acuario\n")


def test_report_indents_by_level():
    text = report(build_sign_tree(["leo", "aries", "virgo"]))
    assert " " * 18 + "virgo\n" in text
    assert " " * 18 + "aries\n" in text


def test_report_on_empty_tree():
    text = report(build_sign_tree([]))
    assert "\nMAXIMO: \n" in text
    assert "\nMINIMO: \n" in text


def test_main_prints_report(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out == report(build_sign_tree(SIGNS))