"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from buildergen.api import definition_json_schemas


def generate_schemas(schemas_dir: Path = None):
    """Write one <name>.schema.json per model."""
    if schemas_dir is None:
        schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(parents=True, exist_ok=True)

    written = []
    for name, schema in definition_json_schemas().items():
        schema_path = schemas_dir / f"{name}.schema.json"
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(schema, f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")
        written.append(schema_path)

    print("\nSchema generation complete!")
    return written


if __name__ == "__main__":
    generate_schemas()
