"""Tests for the click and argparse adapters."""
import argparse

import click
import pytest
from click.testing import CliRunner

from maybe_hex import MaybeHexParamType, maybe_hex_arg, U8, U16


class TestMaybeHexParamType:
    def test_name_follows_type(self):
        assert MaybeHexParamType("u16").name == "u16"
    
    @pytest.mark.parametrize("text, expected", [("255", 255), ("0xff", 255), ("ff", 255)])
    def test_convert(self, text, expected):
        assert MaybeHexParamType(U8).convert(text, None, None) == expected
    
    def test_int_passthrough(self):
        assert MaybeHexParamType(U8).convert(7, None, None) == 7
    
    def test_int_out_of_range(self):
        with pytest.raises(click.BadParameter, match="out of range"):
            MaybeHexParamType(U8).convert(300, None, None)
    
    def test_invalid_literal(self):
        with pytest.raises(click.BadParameter, match="not a valid u8"):
            MaybeHexParamType(U8).convert("0XFF", None, None)
    
    def test_click_option(self):
        @click.command()
        @click.option("--mask", type=MaybeHexParamType(U16), default="0xffff")
        def cmd(mask):
            click.echo(mask)
        
        runner = CliRunner()
        assert runner.invoke(cmd, []).output.strip() == "65535"
        assert runner.invoke(cmd, ["--mask", "0x10"]).output.strip() == "16"
        
        result = runner.invoke(cmd, ["--mask", "0x10000"])
        assert result.exit_code == 2
        assert "Invalid value" in result.output


class TestMaybeHexArg:
    def test_converter_name(self):
        assert maybe_hex_arg("u16").__name__ == "u16"
    
    def test_int_passthrough(self):
        convert = maybe_hex_arg(U8)
        assert convert(200) == 200
        with pytest.raises(ValueError, match="out of range"):
            convert(256)
    
    def test_argparse_accepts_both_spellings(self):
        parser = argparse.ArgumentParser()
        parser.add_argument("--addr", type=maybe_hex_arg(U16))
        assert parser.parse_args(["--addr", "4096"]).addr == 4096
        assert parser.parse_args(["--addr", "0x1000"]).addr == 4096
    
    def test_argparse_reports_invalid_value(self, capsys):
        parser = argparse.ArgumentParser(prog="tool")
        parser.add_argument("--addr", type=maybe_hex_arg(U16))
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--addr", "0x10ABCDEF"])
        assert exc_info.value.code == 2
        assert "invalid u16 value: '0x10ABCDEF'" in capsys.readouterr().err
