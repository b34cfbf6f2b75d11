from ddlgen.config.type_mapping import build_catalog, load_type_mapping

__all__ = [
    'build_catalog',
    'load_type_mapping',
]
