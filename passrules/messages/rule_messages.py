# passrules/messages/rule_messages.py

from passrules.core.charsets.config import Charset
from passrules.core.replacement.config import Replacement

# ✅ Positive
RULE_APPLIED_SUCCESS = "Password rule applied successfully."
RULE_STEPS_SUCCESS = "Password rule steps computed successfully."
RULE_OPTIONS_SUCCESS = "Available rule options."

# ❌ Errors
INVALID_RULE = "Invalid password rule configuration."
PREFIX_DICTIONARY_UNAVAILABLE = "Word-prefix dictionary could not be loaded."

# Command line
RULE_PARAMETERS = (
    "<character set> <replacement> <word> <character position> "
    "[<add spaces between characters>]"
)

RULE_PARAMETERS_HELP = f"""\
  <character set>
    Specifies the character set to which the input is cast.
    Either '{Charset.ASCII.value}' or '{Charset.LOWERCASE_LETTERS.value}'
  <replacement>
    Specifies whether to replace certain character sequences.
    Either '{Replacement.NONE.value}' or '{Replacement.WORD_PREFIXES.value}'
  <word>
    Specifies which tokens to take.
    Possible values: 'every', 'every2nd', ...
  <character position>
    Specifies which characters to take from each token.
    Possible values:
      '1st', '2nd', ...
      'last', '2ndlast', ...
      '1st+2nd', ..., '1st+last', ..., '1st+2nd+3rd', ...
  <add spaces between characters>
    Either 'false' (default) or 'true' (add one space
    between each pair of character of the output passwords)
"""
