import pytest

from enclavecodec.errors import DecodeError
from enclavecodec.x509.cli import main


def test_encode_prints_numbered_banners(capsys):
    assert main(["--encode", "deadbeef", "cafebabe"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "=== Printing Base64 1 of 2 ===",
        "3q2+7w==",
        "",
        "=== Printing Base64 2 of 2 ===",
        "yv66vg==",
        "",
    ]


def test_encode_pem(chain_ders, chain_pems, capsys):
    assert main(["-e", chain_ders[1].hex(), "--pem"]) == 0
    out = capsys.readouterr().out
    assert chain_pems[1].strip() in out


def test_decode_chain(tmp_path, chain_pems, chain_ders, capsys):
    p = tmp_path / "chain.pem"
    p.write_text("".join(chain_pems))
    assert main(["-d", str(p)]) == 0
    lines = capsys.readouterr().out.splitlines()
    banners = [line for line in lines if line.startswith("===")]
    assert banners == ["=== Printing DER %d of 3 ===" % i for i in (1, 2, 3)]
    for i, der in enumerate(chain_ders):
        assert lines[3 * i + 1] == der.hex()


def test_decode_aborts_on_bad_block(tmp_path, chain_pems, capsys):
    p = tmp_path / "chain.pem"
    p.write_text(chain_pems[0] + "-----BEGIN CERTIFICATE-----\n!!!!\n-----END CERTIFICATE-----\n")
    with pytest.raises(DecodeError):
        main(["--decode", str(p)])
    # the first block was already printed
    assert "=== Printing DER 1 of 2 ===" in capsys.readouterr().out


@pytest.mark.parametrize("argv,message", [
    (["-d"], "Missing PEM path"),
    (["-d", "/does/not/exist.pem"], "file not found"),
])
def test_decode_usage_errors(argv, message, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert message in captured.err


@pytest.mark.parametrize("argv", [[], ["--frobnicate"]])
def test_unknown_or_missing_instruction(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
