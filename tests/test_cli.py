import pytest

from geoutm import __version__
from geoutm.cli import main


def test_cli_forward(capsys):
    assert main(['forward', '-28.234982', '79.293801']) == 0
    zone, e, n = capsys.readouterr().out.split()
    assert int(zone) == 44
    assert abs(float(e) - 332593.76) < 0.01
    assert abs(float(n) - 6875587.59) < 0.01


def test_cli_forward_with_zone(capsys):
    assert main(['forward', '0.129899', '-178.129381', '--zone', '1']) == 0
    zone, e, n = capsys.readouterr().out.split()
    assert int(zone) == 1
    assert abs(float(e) - 374320.30) < 0.01


def test_cli_forward_invalid_zone(capsys):
    assert main(['forward', '0.129899', '-178.129381', '--zone', '61']) == 2
    captured = capsys.readouterr()
    assert captured.out == ''
    assert 'error:' in captured.err
    assert '61' in captured.err


def test_cli_inverse(capsys):
    assert main(['inverse', '234000', '712398', '24']) == 0
    lat, lon = map(float, capsys.readouterr().out.split())
    assert abs(lat - 6.439349839) < 1e-6
    assert abs(lon + 41.404857229) < 1e-6


def test_cli_inverse_south(capsys):
    assert main(['inverse', '355987', '3451980', '60', '--south']) == 0
    lat, lon = map(float, capsys.readouterr().out.split())
    assert abs(lat + 59.047252269) < 1e-6
    assert abs(lon - 174.489529022) < 1e-6


def test_cli_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--version'])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out
