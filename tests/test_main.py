from unittest.mock import patch
import main


def run_cli(capsys, *argv):
    with patch("sys.argv", ["main.py", *argv]):
        exit_code = main.main()
    return exit_code, capsys.readouterr().out


def extract_proof(output):
    for line in output.splitlines():
        if line.startswith("Proof:"):
            return line.split()[-1]
    raise AssertionError("no proof printed")


def test_generate_then_verify(capsys):
    exit_code, output = run_cli(capsys, "generate", b"test".hex(), "1000", "--bits", "64")
    assert exit_code == 0
    proof_hex = extract_proof(output)
    assert len(bytes.fromhex(proof_hex)) == 20

    exit_code, output = run_cli(capsys, "verify", b"test".hex(), "1000", proof_hex, "--bits", "64")
    assert exit_code == 0
    assert "Verification: Valid" in output

    exit_code, output = run_cli(
        capsys, "verify", b"test".hex(), "1000", proof_hex, "--bits", "64", "--slow"
    )
    assert exit_code == 0


def test_verify_invalid_proof(capsys):
    exit_code, output = run_cli(capsys, "verify", b"test".hex(), "1000", "00" * 20, "--bits", "64")
    assert exit_code == 1
    assert "Verification: Invalid" in output


def test_generate_failure(capsys):
    exit_code, output = run_cli(
        capsys, "generate", b"test".hex(), "65", "--bits", "64", "--pietrzak"
    )
    assert exit_code == 1
    assert "Proof generation failed." in output


def test_generate_save(capsys):
    with patch("main.initialize_database") as mock_init, \
         patch("main.DatabaseService.save_many") as mock_save:
        exit_code, output = run_cli(
            capsys, "generate", b"test".hex(), "66", "--bits", "64", "--pietrzak", "--save"
        )

    assert exit_code == 0
    mock_init.assert_called_once_with()
    mock_save.assert_called_once()
    (saved,) = mock_save.call_args.args[0]
    assert saved.scheme == "pietrzak"
    assert saved.iterations == 66
    assert "Saved proof" in output
