from zephyr.parser.tokenizer import ParsedClass, parse_class, split_variants
from zephyr.parser.variants import VariantTable

__all__ = ["ParsedClass", "VariantTable", "parse_class", "split_variants"]
