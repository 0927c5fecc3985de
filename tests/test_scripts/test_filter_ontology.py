"""Tests for the filter_ontology command line script."""

from pathlib import Path

import pytest

from conftest import PIZZA_TOML, ex
from ontofilter.models import AxiomType, Ontology


@pytest.fixture
def pizza_file(tmp_path: Path) -> Path:
    path = tmp_path / "pizza.toml"
    path.write_text(PIZZA_TOML)
    return path


class TestFilterOntologyMain:
    """Tests for main()."""

    def test_writes_output_file(self, tmp_path: Path, pizza_file: Path):
        """Filtering with --select writes the selected axioms to --output."""
        from scripts.filter_ontology import main

        out = tmp_path / "out.toml"
        code = main(["-i", str(pizza_file), "-e", "ex:Margherita", "-s", "named parents", "-o", str(out)])

        assert code == 0
        result = Ontology.load_toml(out)
        assert {a.terms for a in result.axioms} == {
            (ex("NamedPizza"), ex("Pizza")),
            (ex("Margherita"), ex("NamedPizza")),
        }

    def test_prints_to_stdout(self, pizza_file: Path, capsys):
        from scripts.filter_ontology import main

        code = main(["-i", str(pizza_file), "--axioms", "a_box"])

        assert code == 0
        output = capsys.readouterr().out
        result = Ontology.load_toml_string(output)
        assert [a.axiom_type for a in result.axioms] == [AxiomType.CLASS_ASSERTION]

    def test_select_clauses_apply_in_order(self, tmp_path: Path, pizza_file: Path):
        from scripts.filter_ontology import main

        out = tmp_path / "out.toml"
        code = main([
            "-i", str(pizza_file),
            "-e", "ex:Margherita",
            "-s", "self parents",
            "-s", "named complement",
            "-o", str(out),
        ])

        assert code == 0
        assert [a.terms for a in Ontology.load_toml(out).axioms] == [(ex("NamedPizza"), ex("Pizza"))]

    def test_entities_file(self, tmp_path: Path, pizza_file: Path):
        from scripts.filter_ontology import main

        terms = tmp_path / "terms.txt"
        terms.write_text("# individuals\nex:myPizza\n")
        out = tmp_path / "out.toml"
        code = main(["-i", str(pizza_file), "-E", str(terms), "-o", str(out)])

        assert code == 0
        result = Ontology.load_toml(out)
        assert len(result.axioms) == 1
        assert set(result.entities) == {ex("Margherita"), ex("myPizza")}

    def test_trim_false_keeps_entities(self, tmp_path: Path, pizza_file: Path):
        from scripts.filter_ontology import main

        out = tmp_path / "out.toml"
        code = main(["-i", str(pizza_file), "-a", "a_box", "--trim", "false", "-o", str(out)])

        assert code == 0
        assert ex("Unused") in Ontology.load_toml(out).entities

    def test_prefix_option(self, tmp_path: Path, pizza_file: Path):
        from scripts.filter_ontology import main

        out = tmp_path / "out.toml"
        code = main([
            "-i", str(pizza_file),
            "-p", "pz: http://example.org/pizza#",
            "-e", "pz:myPizza",
            "-o", str(out),
        ])

        assert code == 0
        assert len(Ontology.load_toml(out).axioms) == 1

    def test_output_iri(self, tmp_path: Path, pizza_file: Path):
        from scripts.filter_ontology import main

        out = tmp_path / "out.toml"
        code = main(["-i", str(pizza_file), "-a", "a_box", "-O", "http://example.org/pizza-abox", "-o", str(out)])

        assert code == 0
        assert Ontology.load_toml(out).iri == "http://example.org/pizza-abox"

    def test_malformed_record_fails(self, tmp_path: Path, caplog):
        from scripts.filter_ontology import main

        bad = tmp_path / "bad.toml"
        bad.write_text('[[axioms]]\ntype = "SubClassOf"\nterms = [1, 2]\n')

        code = main(["-i", str(bad)])

        assert code == 1
        assert "Invalid ontology record" in caplog.text

    def test_invalid_axiom_type_fails(self, pizza_file: Path, caplog):
        from scripts.filter_ontology import main

        code = main(["-i", str(pizza_file), "-a", "subclassof+bogus"])

        assert code == 1
        assert "bogus is not a valid axiom type" in caplog.text

    def test_invalid_select_fails(self, pizza_file: Path, caplog):
        from scripts.filter_ontology import main

        code = main(["-i", str(pizza_file), "-s", "cousins"])

        assert code == 1
        assert "cousins is not a valid selection" in caplog.text

    def test_pattern_select_fails(self, pizza_file: Path, caplog):
        from scripts.filter_ontology import main

        code = main(["-i", str(pizza_file), "-s", "rdfs:label=~'piz.*'"])

        assert code == 1
        assert "not yet implemented" in caplog.text

    def test_missing_input_fails(self, tmp_path: Path):
        from scripts.filter_ontology import main

        assert main(["-i", str(tmp_path / "missing.toml")]) == 1

    def test_bad_trim_value_exits(self, pizza_file: Path):
        from scripts.filter_ontology import main

        with pytest.raises(SystemExit):
            main(["-i", str(pizza_file), "--trim", "maybe"])


class TestParseBool:
    """Tests for parse_bool."""

    def test_values(self):
        from scripts.filter_ontology import parse_bool

        assert parse_bool("true") is True
        assert parse_bool("FALSE") is False
        assert parse_bool("1") is True
