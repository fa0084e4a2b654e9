from .entry_builder import build_entry, call_openai_json, load_prompt_template

__all__ = ['build_entry', 'call_openai_json', 'load_prompt_template']
