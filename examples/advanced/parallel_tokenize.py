"""Free-threading safe: one Tokenizer, 1000 inputs in parallel."""

from concurrent.futures import ThreadPoolExecutor

from lexora import Tokenizer, TokenizerConfig, common

tokenizer = Tokenizer(
    literals=[("assign", "="), ("add", "+")],
    patterns=[common.C_NAME, common.NUMBER],
    config=TokenizerConfig(ignore_whitespace=True),
)

sources = [f"x{i} = {i} + y" for i in range(1000)]

with ThreadPoolExecutor(max_workers=8) as ex:
    results = list(ex.map(tokenizer.tokenize, sources))

print(f"Tokenized {len(results)} inputs in parallel")
print("First:", results[0])
print("Last:", results[-1])
