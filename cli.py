import typer
import os
from typing import List, Optional

from prisma_builder.core.config import settings
from prisma_builder.core.exceptions import SchemaValidationException
from prisma_builder.core.FieldParser import FieldParseError, FieldParser
from prisma_builder.core.schemas.fields import ScalarType
from prisma_builder.core.services.field_service import FieldService
from prisma_builder.core.services.schema_renderer import SchemaRenderer

app = typer.Typer(help="CLI for building Prisma model blocks.")


# ---------------------------
# Helpers
# ---------------------------
def write_file(path: str, content: str):
    """Write ``content`` to ``path``, creating parent folders."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, "w") as f:
        f.write(content + "\n")
    print(f"✅ Created: {path}")


# ---------------------------
# Commands
# ---------------------------
@app.command()
def render(
    model_name: str,
    fields: Optional[List[str]] = typer.Option(
        None,
        "--field",
        "-f",
        help="Field as 'name:Type[]?;id;unique;updatedAt;default=v;map=n;fields=a,b;references=c,d'. Repeat for more fields.",
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help=f"Write the schema to a file, e.g. {settings.DEFAULT_OUTPUT_FILE}"
    ),
    defaults: bool = typer.Option(
        True, "--defaults/--no-defaults", help="Start from the id/createdAt/updatedAt fields."
    ),
):
    """Render a Prisma model block from field definitions."""
    try:
        field_list = FieldParser.parse_fields(fields or [])
    except FieldParseError as e:
        print(f"❌ {e}")
        raise typer.Exit(1)

    if defaults:
        model = FieldService.create_model(model_name)
        for attrs in field_list:
            model = FieldService.add_field(model, **attrs)
    else:
        model = FieldService.create_model(model_name, field_list)

    try:
        schema = SchemaRenderer.render(model)
    except SchemaValidationException as e:
        print(f"❌ {e.detail}")
        raise typer.Exit(1)

    if output:
        write_file(output, schema)
    else:
        print(schema)


@app.command()
def types():
    """List the scalar types a field can have."""
    print("📁 Scalar types:")
    for scalar in ScalarType:
        print(f"  🏷️  {scalar.value}")


@app.command()
def serve(
    host: str = typer.Option(settings.HOST, help="Bind address"),
    port: int = typer.Option(settings.PORT, help="Bind port"),
    reload: bool = typer.Option(False, help="Enable auto-reload"),
):
    """Run the HTTP API."""
    from prisma_builder.main import run

    print(f"🚀 Serving {settings.PROJECT_NAME} on {host}:{port}")
    run(host=host, port=port, reload=reload)


# ---------------------------
# Entrypoint
# ---------------------------
if __name__ == "__main__":
    app()

    """
    # Post model on top of the default id/createdAt/updatedAt fields
python cli.py render Post -f "title:String;default=untitled" -f "published:Boolean;default=false"

# Only the fields given, written to schema.prisma
python cli.py render Post --no-defaults -f "id:Int;id;default=autoincrement()" -f "title:String" -o schema.prisma
    """
