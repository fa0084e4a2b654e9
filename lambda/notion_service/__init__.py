from .notion import save_to_notion, build_page_properties, build_example_blocks, check_database, PROPERTY_TYPES

__all__ = ['save_to_notion', 'build_page_properties', 'build_example_blocks', 'check_database', 'PROPERTY_TYPES']
