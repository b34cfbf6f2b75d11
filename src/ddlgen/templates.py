"""
Jinja2 templates for generated data access modules.

Templates are written in the layout black produces so that formatting is
mostly a validation step. Method templates are indented for the class body.
"""

IMPORTS_TEMPLATE = """\
{% for line in imports %}
{{ line }}
{% endfor %}
"""

RECORD_TEMPLATE = """\
@dataclass
class {{ schema.name }}:
{% for column in schema.columns %}
    {{ column.attr }}: {{ column.data_type.type_name }} = None
{% endfor %}
"""

SCAN_TEMPLATE = """\
    def scan(self, row):
        \"\"\"Populate the record from one positional {{ schema.name }} row.\"\"\"
        if len(row) != {{ schema.columns | length }}:
            raise ValueError(f"{{ schema.name }}.scan expected {{ schema.columns | length }} columns, got {len(row)}")
        (
{% for column in schema.columns %}
            self.{{ column.attr }},
{% endfor %}
        ) = row
        return self
"""

INSERT_TEMPLATE = """\
    def insert(self, cn):
        \"\"\"Insert the record using positional parameters.\"\"\"
        query = "INSERT INTO {{ schema.name }} ({{ parts.columns | join(', ') }}) VALUES ({{ parts.placeholders | join(', ') }})"
        try:
            cn.execute(
                query,
{% for value in parts.values %}
                {{ value }},
{% endfor %}
            )
        except Exception as exc:
            raise RuntimeError(f"Failed to insert {{ schema.name }}, {self!r} => {exc}") from exc
"""

FILE_TEMPLATE = """\
\"\"\"Data access for the {{ schema.name }} table in package {{ package_name }}.

Generated by ddlgen from a CREATE TABLE statement; do not edit.
\"\"\"

{{ imports }}

__all__ = ["{{ schema.name }}"]


{{ record }}
{{ scan }}
{{ insert }}"""

TEMPLATES = {
    'imports': IMPORTS_TEMPLATE,
    'record': RECORD_TEMPLATE,
    'scan': SCAN_TEMPLATE,
    'insert': INSERT_TEMPLATE,
    'file': FILE_TEMPLATE,
}
