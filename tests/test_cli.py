from typer.testing import CliRunner

from cli import app

runner = CliRunner()


def test_render_with_default_fields():
    result = runner.invoke(app, ["render", "Post", "-f", "title:String;default=untitled"])
    assert result.exit_code == 0
    assert result.output.strip() == (
        "model Post {\n"
        "  id Int @id @default(autoincrement())\n"
        "  createdAt DateTime @default(now())\n"
        "  updatedAt DateTime @updatedAt\n"
        '  title String @default("untitled")\n'
        "}"
    )


def test_render_without_defaults():
    result = runner.invoke(
        app,
        [
            "render", "Post", "--no-defaults",
            "-f", "id:Int;id;default=autoincrement()",
            "-f", "title:String",
            "-f", "published:Boolean;default=false",
        ],
    )
    assert result.exit_code == 0
    assert result.output.strip() == (
        "model Post {\n"
        "  id Int @id @default(autoincrement())\n"
        "  title String\n"
        "  published Boolean @default(false)\n"
        "}"
    )


def test_render_writes_output_file(tmp_path):
    target = tmp_path / "prisma" / "schema.prisma"
    result = runner.invoke(app, ["render", "User", "-o", str(target)])
    assert result.exit_code == 0
    assert target.read_text().startswith("model User {\n")
    assert target.read_text().endswith("}\n")


def test_render_blank_name_fails():
    result = runner.invoke(app, ["render", " "])
    assert result.exit_code == 1
    assert "Model name is required" in result.output


def test_render_without_any_field_fails():
    result = runner.invoke(app, ["render", "User", "--no-defaults"])
    assert result.exit_code == 1
    assert "at least 1 named field" in result.output


def test_render_bad_field_definition_fails():
    result = runner.invoke(app, ["render", "User", "-f", "x:Widget"])
    assert result.exit_code == 1
    assert "Unknown type" in result.output


def test_types_lists_scalars():
    result = runner.invoke(app, ["types"])
    assert result.exit_code == 0
    assert "DateTime" in result.output
    assert "Bytes" in result.output
