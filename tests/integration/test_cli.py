import pytest
from click.testing import CliRunner
from t2u.CLI.main import cli
import yaml

def test_cli_help():
    runner = CliRunner()
    result = runner.invoke(cli, ['--help'])
    assert result.exit_code == 0
    assert 'Expand a URI template' in result.output

def test_cli_expand():
    runner = CliRunner()
    result = runner.invoke(cli, ['expand', '/search{?q,lang}', '-v', 'q=hello world', '-v', 'lang=en'])
    assert result.exit_code == 0
    assert result.output == '/search?q=hello%20world&lang=en\n'

def test_cli_expand_vars_file(tmp_path):
    vars_file = tmp_path / "vars.yml"
    with open(vars_file, 'w') as f:
        yaml.dump({'owner': 'octo', 'repo': 'hello'}, f)

    runner = CliRunner()
    result = runner.invoke(cli, ['expand', '/repos/{owner}/{repo}', '-f', str(vars_file), '-v', 'repo=world'])
    assert result.exit_code == 0
    assert result.output.strip() == '/repos/octo/world'

def test_cli_expand_environ(monkeypatch):
    monkeypatch.setenv('T2U_HOST', 'example.com')
    runner = CliRunner()
    result = runner.invoke(cli, ['expand', 'http://{T2U_HOST}/', '--environ'])
    assert result.exit_code == 0
    assert result.output.strip() == 'http://example.com/'

def test_cli_expand_bad_pair():
    runner = CliRunner()
    result = runner.invoke(cli, ['expand', '{x}', '-v', 'novalue'])
    assert result.exit_code == 1
    assert 'Error: Expected NAME=VALUE' in result.output

def test_cli_expand_missing_file():
    runner = CliRunner()
    result = runner.invoke(cli, ['expand', '{x}', '-f', 'non_existent.yml'])
    assert result.exit_code == 1
    assert 'Error: Variables file not found' in result.output

def test_cli_inspect():
    runner = CliRunner()
    result = runner.invoke(cli, ['inspect', '{a}{?x,y}'])
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert lines[0].split() == ['OPERATOR', 'VARIABLES']
    assert lines[2].split() == ['(simple)', 'a']
    assert lines[3].split() == ['?', 'x,y']

def test_cli_inspect_nothing():
    runner = CliRunner()
    result = runner.invoke(cli, ['inspect', 'plain/{}'])
    assert result.exit_code == 0
    assert 'No expressions found.' in result.output

def test_cli_format():
    runner = CliRunner()
    result = runner.invoke(cli, ['format', '{0}/{1}/{2}', 'a', 'b'])
    assert result.exit_code == 0
    assert result.output.strip() == 'a/b/{2}'
