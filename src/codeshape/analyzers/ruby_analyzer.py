"""Ruby language analyzer"""

import re

from .base import DQ_STRING, HASH_COMMENT, SQ_STRING, Analyzer, find_all
from .models import Identifiers, ImportKind, ModuleRef

_CLASS = r"^[ \t]*(?:class|module)\s+([A-Z][\w:]*)"
_METHOD = r"^[ \t]*def\s+(?:self\.)?([A-Za-z_]\w*[?!=]?)"
_INSTANCE_VAR = r"(?<![@\w])@([a-z_]\w*)"
_CONSTANT = r"^[ \t]*([A-Z][A-Z0-9_]*)\s*=(?!=)"

_REQUIRE = re.compile(r"""^[ \t]*(require|require_relative)\s*\(?\s*['"]([^'"]+)['"]""", re.M)
_BLOCK_COMMENT = r"(?ms:^=begin\b.*?^=end\b)"

_RAILS = re.compile(
    r"ActiveRecord::Base|ApplicationRecord|ActionController::Base|ApplicationController"
    r"|ActionMailer::Base|ApplicationJob|Rails\."
)
_RSPEC = re.compile(r"^\s*(?:RSpec\.)?describe\b|^\s*it\s+['\"]", re.M)


class RubyAnalyzer(Analyzer):
    """Analyzer for Ruby sources"""

    name = "ruby"
    comment_patterns = (_BLOCK_COMMENT, HASH_COMMENT)
    string_patterns = (DQ_STRING, SQ_STRING)

    def extract_identifiers(self, content: str) -> Identifiers:
        return Identifiers.build(
            variables=find_all([_INSTANCE_VAR, _CONSTANT], content, re.M),
            functions=find_all([_METHOD], content, re.M),
            classes=find_all([_CLASS], content, re.M),
        )

    def extract_imports(self, content: str) -> list[ModuleRef]:
        refs = []
        seen = set()
        for match in _REQUIRE.finditer(content):
            spec = match.group(2)
            if spec in seen:
                continue
            seen.add(spec)
            if match.group(1) == "require_relative":
                # require_relative paths are relative to the requiring file
                if not spec.startswith("."):
                    spec = "./" + spec
                refs.append(ModuleRef(spec, ImportKind.RELATIVE))
            else:
                refs.append(ModuleRef(spec, ImportKind.ABSOLUTE))
        return refs

    def detect_tags(self, content: str) -> list[str]:
        tags = []
        if _RAILS.search(content):
            tags.append("Ruby on Rails")
        if _RSPEC.search(content) or "require 'rspec'" in content or 'require "rspec"' in content:
            tags.append("RSpec")
        return tags
