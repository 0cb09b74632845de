import json


class TestDemo:
    '''Test the `flask orders demo` command.'''

    def test_default_variant(self, runner):
        '''The configured variant keeps the size and describes the second order.'''
        result = runner.invoke(args=['orders', 'demo'])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 4
        assert json.loads(lines[1])['size'] == 'small'
        assert lines[3] == 'This is a small Pizza from parent '

    def test_variant_a(self, runner):
        result = runner.invoke(args=['orders', 'demo', '--variant', 'a'])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 3
        assert 'size' not in json.loads(lines[1])
        assert lines[2] == 'This is a Medium Pizza from parent '

    def test_unknown_variant(self, runner):
        result = runner.invoke(args=['orders', 'demo', '--variant', 'C'])
        assert result.exit_code == 2


class TestServe:
    '''Test the `flask orders serve` command.'''

    def test_pizza(self, runner):
        payload = {'size': 'Large', 'toppings': ['ham'], 'preference': 'Non-veg', 'crust': 'Thin'}
        result = runner.invoke(args=['orders', 'serve', json.dumps(payload)])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            json.dumps(payload),
            'This is a Large Pizza from parent ',
        ]

    def test_stuffed_without_size(self, runner):
        payload = {'toppings': ['cheese'], 'preference': 'Veg', 'crust': 'Thick', 'stuffing': 'Cheddar'}
        result = runner.invoke(args=['orders', 'serve', json.dumps(payload)])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == 'This is a  Pizza from parent '

    def test_malformed_json(self, runner):
        result = runner.invoke(args=['orders', 'serve', '{size: Large'])
        assert result.exit_code == 2
        assert 'should be in JSON' in result.output

    def test_not_an_object(self, runner):
        result = runner.invoke(args=['orders', 'serve', '["Large"]'])
        assert result.exit_code == 2

    def test_invalid_order(self, runner):
        result = runner.invoke(args=['orders', 'serve', '{"size": 12}'])
        assert result.exit_code == 2
        assert 'size' in result.output


class TestConfiguredVariant:
    '''Test the `flask orders demo` command with the variant taken from the config.'''

    def test_unknown_configured_variant(self, app, runner, monkeypatch, caplog):
        '''A bad DEMO_VARIANT is a usage error and is logged.'''
        monkeypatch.setitem(app.config, 'DEMO_VARIANT', 'C')
        result = runner.invoke(args=['orders', 'demo'])
        assert result.exit_code == 2
        assert 'DEMO_VARIANT' in result.output
        assert any(record.levelname == 'ERROR' and 'demo variant' in record.getMessage()
                   for record in caplog.records)

    def test_lowercase_configured_variant(self, app, runner, monkeypatch):
        monkeypatch.setitem(app.config, 'DEMO_VARIANT', 'a')
        result = runner.invoke(args=['orders', 'demo'])
        assert result.exit_code == 0
        assert len(result.output.splitlines()) == 3


def test_not_an_object_is_logged(runner, caplog):
    result = runner.invoke(args=['orders', 'serve', '["Large"]'])
    assert result.exit_code == 2
    assert any(record.levelname == 'ERROR' and 'not an object' in record.getMessage()
               for record in caplog.records)
