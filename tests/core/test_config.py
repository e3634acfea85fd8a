import pytest
from pipep import pipe, dotdict, PipeOptions, load_options, dump_options, ArityError

from fixtures import run


def write(path, text):
    path.write_text(text)
    return str(path)


class TestOptions:

    def test_defaults(self):
        options = PipeOptions()
        assert options.strict_arity is False
        assert options.report is False
        assert PipeOptions(report=True).report is True
        with pytest.raises(KeyError):
            PipeOptions(retry=3)

    def test_dotdict(self):
        cfg = dotdict.create({"a": {"b": [{"c": 1}]}})
        assert cfg.a.b[0].c == 1
        cfg.d = 2
        assert cfg["d"] == 2
        with pytest.raises(AttributeError):
            cfg.missing
        assert type(dotdict.serialize(cfg)["a"]) is dict


class TestLoadOptions:

    def test_section(self, tmp_path):
        path = write(tmp_path / "options.yaml", "pipep:\n  strict_arity: true\nother: 1\n")
        options = load_options(path)
        assert options.strict_arity is True
        assert options.report is False
        assert isinstance(options, PipeOptions)

    def test_top_level(self, tmp_path):
        path = write(tmp_path / "options.yaml", "report: true\n")
        assert load_options(path).report is True

    def test_empty(self, tmp_path):
        path = write(tmp_path / "options.yaml", "")
        assert load_options(path) == PipeOptions()

    def test_unknown_key(self, tmp_path):
        path = write(tmp_path / "options.yaml", "pipep:\n  timeout: 10\n")
        with pytest.raises(KeyError):
            load_options(path)

    def test_include(self, tmp_path):
        write(tmp_path / "common.yaml", "strict_arity: true\nreport: true\n")
        path = write(tmp_path / "options.yaml", "pipep: !include common.yaml\n")
        options = load_options(path)
        assert options.strict_arity is True
        assert options.report is True

    def test_dump(self, tmp_path):
        path = str(tmp_path / "options.yaml")
        dump_options(PipeOptions(report=True), path)
        assert load_options(path) == PipeOptions(report=True)

    def test_options_drive_pipe(self, tmp_path):
        path = write(tmp_path / "options.yaml", "pipep:\n  strict_arity: true\n")
        p = pipe(lambda a, b: a - b, options=load_options(path))
        assert run(p(3, 1)) == 2
        with pytest.raises(ArityError, match="at most 2 arguments"):
            run(p(3, 1, 0))
