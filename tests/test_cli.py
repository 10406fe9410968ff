"""Tests for configuration and the command line entry point."""

import logging

import pytest
from PIL import Image

from pathtracer.config import DEFAULT_WIDTH, QUALITY_PRESETS, RenderConfig
from pathtracer.logging_config import setup_logging
from pathtracer.main import main, parse_args


class TestRenderConfig:
    def test_defaults(self):
        config = RenderConfig.from_args(parse_args([]))
        assert config.scene == "random_spheres"
        assert config.width == DEFAULT_WIDTH
        assert config.samples_per_pixel == 100
        assert config.max_depth == 50
        assert config.output == "image.ppm"

    def test_quality_preset(self):
        config = RenderConfig.from_args(parse_args(["--quality", "preview"]))
        preset = QUALITY_PRESETS["preview"]
        assert config.samples_per_pixel == preset["samples"]
        assert config.max_depth == preset["bounces"]
        assert config.width == int(DEFAULT_WIDTH * preset["scale"])

    def test_explicit_flags_override_preset(self):
        config = RenderConfig.from_args(parse_args(
            ["--quality", "final", "--samples", "3", "--max-depth", "4", "--width", "64"]))
        assert config.samples_per_pixel == 3
        assert config.max_depth == 4
        assert config.width == 64

    def test_height_from_aspect_ratio(self):
        config = RenderConfig(width=400)
        assert config.height(16.0 / 9.0) == 225
        assert RenderConfig(width=1).height(16.0 / 9.0) == 1

    @pytest.mark.parametrize("argv", [
        ["--width", "0"],
        ["--samples", "0"],
        ["--max-depth", "0"],
        ["--threads", "0"],
        ["--aspect-ratio", "-1"],
    ])
    def test_validation(self, argv):
        with pytest.raises(ValueError):
            RenderConfig.from_args(parse_args(argv))


class TestMain:
    def test_renders_tiny_image(self, tmp_path):
        out = tmp_path / "tiny.png"
        code = main(["--scene", "two_spheres", "--width", "8", "--samples", "1",
                     "--max-depth", "2", "--threads", "2", "--seed", "1",
                     "--output", str(out), "--log-level", "WARNING"])
        assert code == 0
        with Image.open(out) as img:
            assert img.size == (8, 4)

    def test_unknown_scene_fails_without_output(self, tmp_path, capsys):
        out = tmp_path / "never.ppm"
        code = main(["--scene", "teapot", "--output", str(out), "--log-level", "WARNING"])
        assert code == 1
        assert not out.exists()
        assert "teapot" in capsys.readouterr().err

    def test_invalid_depth_fails(self, capsys):
        assert main(["--max-depth", "0"]) == 1
        assert "max depth" in capsys.readouterr().err

    def test_list_scenes(self, capsys):
        assert main(["--list-scenes"]) == 0
        out = capsys.readouterr().out
        assert "cornell_box" in out
        assert "final_scene" in out


class TestLogging:
    def test_setup_is_idempotent(self, tmp_path):
        log_file = tmp_path / "logs" / "render.log"
        logger = setup_logging("DEBUG", log_file)
        logger = setup_logging("DEBUG", log_file)
        ours = [h for h in logger.handlers if getattr(h, "_pathtracer_handler", False)]
        assert len(ours) == 2
        assert logger.level == logging.DEBUG
        logging.getLogger("pathtracer.test").debug("hello")
        for h in ours:
            h.flush()
        assert "hello" in log_file.read_text()
        setup_logging("WARNING")

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("chatty").level == logging.INFO
        setup_logging("WARNING")
