from pathlib import Path

from brtaxid.extractors import from_csv, from_txt


def test_from_txt(tmp_path: Path) -> None:
    test_file = tmp_path / "a.txt"
    test_file.write_text("CPF: 529.982.247-25 ção", encoding="utf-8")

    kind, text = from_txt(test_file)
    assert kind == "text"
    assert "529.982.247-25" in text


def test_from_csv(tmp_path: Path) -> None:
    test_file = tmp_path / "a.csv"
    test_file.write_text("nome,documento\nACME,11.444.777/0001-61", encoding="utf-8")

    kind, text = from_csv(test_file)
    assert kind == "csv"
    assert "ACME" in text
    assert "11.444.777/0001-61" in text


def test_from_csv_semicolon_delimited(tmp_path: Path) -> None:
    test_file = tmp_path / "fornecedores.csv"
    test_file.write_text(
        "razao_social;cnpj\nACME Ltda;11.444.777/0001-61\nBeta SA;04.252.011/0001-10\n",
        encoding="utf-8",
    )

    _kind, text = from_csv(test_file)
    lines = text.splitlines()
    assert "11.444.777/0001-61" in lines
    assert "04.252.011/0001-10" in lines


def test_from_csv_cells_are_not_merged(tmp_path: Path) -> None:
    test_file = tmp_path / "split.csv"
    test_file.write_text("a,b\n529982,24725\n", encoding="utf-8")

    _kind, text = from_csv(test_file)
    assert "52998224725" not in text
    assert text.splitlines() == ["a", "b", "529982", "24725"]


def test_latin1_files_are_decoded(tmp_path: Path) -> None:
    test_file = tmp_path / "clientes.csv"
    test_file.write_bytes("nome;cpf\nJoão;529.982.247-25\n".encode("latin-1"))

    _kind, text = from_csv(test_file)
    assert "João" in text
    assert "529.982.247-25" in text

    txt_file = tmp_path / "nota.txt"
    txt_file.write_bytes("Razão social".encode("latin-1"))
    assert from_txt(txt_file) == ("text", "Razão social")
