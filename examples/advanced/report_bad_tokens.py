"""Report every character the tokenizer cannot classify, not just the first."""

from lexora import BadTokenError, Tokenizer, TokenizerConfig, common

tokenizer = Tokenizer(
    literals=[("lparen", "("), ("rparen", ")"), ("comma", ",")],
    patterns=[common.C_NAME, common.NUMBER, common.STRING],
    config=TokenizerConfig(ignore_whitespace=True),
)

source = 'call(a, 1.5, "ok") $ other(#)'

for item in tokenizer.tokenize_lazy(source, source_file="<demo>", skip_errors=True):
    if isinstance(item, BadTokenError):
        print("error:", item)
    else:
        print(f"{item.location}  {item.name:<8} {item.value!r}")
