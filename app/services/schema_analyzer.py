from typing import List

from app.schemas.db_schema import (
    DatabaseSchema,
    Relationship,
    SchemaAnalysis,
    SchemaValidation,
)

TIMESTAMP_COLUMNS = ("created_at", "updated_at", "createdAt", "updatedAt")


def analyze_schema(schema: DatabaseSchema) -> SchemaAnalysis:
    """Count tables/columns/indexes, list foreign-key relationships and suggest improvements."""
    column_count = 0
    index_count = 0
    relationships: List[Relationship] = []
    suggestions: List[str] = []

    for table_name, table in schema.tables.items():
        column_count += len(table.columns)
        index_count += len(table.indexes or [])

        for fk in table.foreign_keys or []:
            # Cardinality is not inferred, every foreign key counts as one-to-many
            relationships.append(Relationship(from_table=table_name, to=fk.referenced_table))

        has_id_column = any(
            name.lower() == "id" and column.auto_increment
            for name, column in table.columns.items()
        )
        if not has_id_column:
            suggestions.append(f"Consider adding an auto-increment ID column to table '{table_name}'.")

        if not any(name in TIMESTAMP_COLUMNS for name in table.columns):
            suggestions.append(f"Consider adding timestamp columns to table '{table_name}'.")

        for fk in table.foreign_keys or []:
            has_index = any(
                all(col in index for col in fk.columns)
                for index in table.indexes or []
            )
            if not has_index:
                suggestions.append(f"Adding an index on foreign key '{', '.join(fk.columns)}' is recommended.")

    return SchemaAnalysis(
        table_count=len(schema.tables),
        column_count=column_count,
        index_count=index_count,
        relationships=relationships,
        suggestions=suggestions,
    )


def validate_schema(schema: DatabaseSchema) -> SchemaValidation:
    errors: List[str] = []
    warnings: List[str] = []

    if not schema.tables:
        errors.append("No tables are defined in the schema.")
        return SchemaValidation(is_valid=False, errors=errors, warnings=warnings)

    for table_name, table in schema.tables.items():
        if not table.columns:
            errors.append(f"Table '{table_name}' has no columns defined.")
            continue

        for fk in table.foreign_keys or []:
            referenced = schema.tables.get(fk.referenced_table)
            if referenced is None:
                errors.append(
                    f"Foreign key on table '{table_name}' references unknown table '{fk.referenced_table}'."
                )
                continue
            for ref_col in fk.referenced_columns:
                if ref_col not in referenced.columns:
                    errors.append(f"Foreign key references unknown column '{fk.referenced_table}.{ref_col}'.")

        for pk_col in table.primary_key or []:
            if pk_col not in table.columns:
                errors.append(f"Primary key of table '{table_name}' references unknown column '{pk_col}'.")

        if not any(name.lower() == "id" for name in table.columns):
            warnings.append(f"Table '{table_name}' has no ID column.")

        if not table.primary_key:
            warnings.append(f"Table '{table_name}' has no primary key defined.")

    return SchemaValidation(is_valid=not errors, errors=errors, warnings=warnings)


def generate_ddl(schema: DatabaseSchema, dialect: str = "mysql") -> str:
    """Render CREATE TABLE / CREATE INDEX statements for the given dialect."""
    statements: List[str] = []

    for table_name, table in schema.tables.items():
        lines: List[str] = []

        for column_name, column in table.columns.items():
            column_def = f"  {column_name} {column.type}"

            if column.auto_increment:
                if dialect == "mysql":
                    column_def += " AUTO_INCREMENT"
                elif dialect == "postgresql":
                    column_def = f"  {column_name} SERIAL"

            if not column.nullable:
                column_def += " NOT NULL"

            # An explicit "default": null still renders DEFAULT NULL
            if "default" in column.model_fields_set:
                default = "NULL" if column.default is None else column.default
                column_def += f" DEFAULT {default}"

            if column.unique:
                column_def += " UNIQUE"

            lines.append(column_def)

        if table.primary_key:
            lines.append(f"  PRIMARY KEY ({', '.join(table.primary_key)})")

        for fk in table.foreign_keys or []:
            fk_def = (
                f"  FOREIGN KEY ({', '.join(fk.columns)}) "
                f"REFERENCES {fk.referenced_table}({', '.join(fk.referenced_columns)})"
            )
            if fk.on_delete:
                fk_def += f" ON DELETE {fk.on_delete}"
            if fk.on_update:
                fk_def += f" ON UPDATE {fk.on_update}"
            lines.append(fk_def)

        statements.append(f"CREATE TABLE {table_name} (\n" + ",\n".join(lines) + "\n);")

    for table_name, table in schema.tables.items():
        # Table-level indexes only carry a name, so they are placed on id
        for index_name in table.indexes or []:
            statements.append(f"CREATE INDEX {index_name} ON {table_name}(id);")

    for index_name, index in (schema.indexes or {}).items():
        unique = "UNIQUE " if index.unique else ""
        statements.append(
            f"CREATE {unique}INDEX {index_name} ON {index.table}({', '.join(index.columns)});"
        )

    return "\n\n".join(statements)


def schema_to_prompt_text(name: str, database: str, schema: DatabaseSchema) -> str:
    """Describe a saved schema as plain text for SQL generation prompts."""
    sections = []
    for table_name, table in schema.tables.items():
        primary_key = set(table.primary_key or [])
        column_details = []
        for column_name, column in table.columns.items():
            col_info = f"{column_name} ({column.type}"
            if column_name in primary_key:
                col_info += ", PRIMARY KEY"
            if column.unique:
                col_info += ", UNIQUE"
            if not column.nullable:
                col_info += ", NOT NULL"
            if column.default is not None:
                col_info += f", DEFAULT: {column.default}"
            col_info += ")"
            column_details.append(f"    • {col_info}")
        for fk in table.foreign_keys or []:
            column_details.append(
                f"    • FOREIGN KEY ({', '.join(fk.columns)}) -> "
                f"{fk.referenced_table}({', '.join(fk.referenced_columns)})"
            )
        sections.append(f"  {table_name}:\n" + "\n".join(column_details))

    return f"DATABASE SCHEMA ({name}, {database}):\n" + "\n\n".join(sections)
