"""Java and Kotlin language analyzers"""

import re

from .base import C_BLOCK_COMMENT, C_LINE_COMMENT, DQ_STRING, SQ_STRING, Analyzer, find_all, to_refs
from .models import Identifiers, ModuleRef

_MODIFIERS = r"(?:(?:public|private|protected|internal|static|final|abstract|sealed|open|data|inner|enum|annotation)\s+)*"

_NOT_STATEMENT = r"(?=\S)(?!(?:return|new|throw|else|case|package|import)\b)"

_IMPORT = re.compile(r"^[ \t]*import\s+(?:static\s+)?([\w.]+(?:\.\*)?)\s*;?", re.M)

# Java declarations
_JAVA_TYPE = rf"^[ \t]*{_MODIFIERS}(?:class|interface|enum|record|@interface)\s+([A-Za-z_]\w*)"
_JAVA_METHOD = (
    rf"^[ \t]*{_NOT_STATEMENT}{_MODIFIERS}(?:synchronized\s+)?(?:<[^>]+>\s*)?"
    r"[\w.<>\[\],? ]+?\s+([a-z_]\w*)\s*\([^)]*\)\s*(?:throws\s+[\w., ]+)?\s*[{;]"
)
_JAVA_FIELD = rf"^[ \t]*{_NOT_STATEMENT}{_MODIFIERS}(?:volatile\s+|transient\s+)*[\w.<>\[\],? ]+?\s+([A-Za-z_]\w*)\s*(?:=[^=]|;)"
_JAVA_KEYWORDS = frozenset({"return", "new", "throw", "else", "case", "package", "import"})

# Kotlin declarations
_KOTLIN_TYPE = rf"^[ \t]*{_MODIFIERS}(?:class|interface|object)\s+([A-Za-z_]\w*)"
_KOTLIN_FUN = r"\bfun\s+(?:<[^>]+>\s*)?(?:[\w.]+\.)?([A-Za-z_]\w*)\s*\("
_KOTLIN_PROPERTY = r"\b(?:val|var)\s+([A-Za-z_]\w*)"

_SPRING = re.compile(
    r"@(?:SpringBootApplication|RestController|Controller|Service|Repository|Component|Autowired)\b"
)
_JUNIT = re.compile(r"@(?:Test|BeforeEach|AfterEach|BeforeAll|AfterAll|Before|After)\b")
_LOMBOK = re.compile(
    r"@(?:Data|Getter|Setter|Builder|NoArgsConstructor|AllArgsConstructor|RequiredArgsConstructor)\b"
)
_ANNOTATION = re.compile(r"^[ \t]*@[A-Za-z_]\w*", re.M)


class JavaAnalyzer(Analyzer):
    """Analyzer for Java sources"""

    name = "java"
    comment_patterns = (C_BLOCK_COMMENT, C_LINE_COMMENT)
    string_patterns = (DQ_STRING, SQ_STRING)

    def extract_identifiers(self, content: str) -> Identifiers:
        classes = find_all([_JAVA_TYPE], content, re.M)
        methods = [
            m for m in find_all([_JAVA_METHOD], content, re.M) if m not in _JAVA_KEYWORDS
        ]
        fields = [
            f
            for f in find_all([_JAVA_FIELD], content, re.M)
            if f not in _JAVA_KEYWORDS and f not in methods
        ]
        return Identifiers.build(variables=fields, functions=methods, classes=classes)

    def extract_imports(self, content: str) -> list[ModuleRef]:
        return to_refs(m.group(1) for m in _IMPORT.finditer(content))

    def detect_tags(self, content: str) -> list[str]:
        imports = [ref.specifier for ref in self.extract_imports(content)]
        tags = []
        if _SPRING.search(content) or any("org.springframework" in i for i in imports):
            tags.append("Spring Boot")
        if _JUNIT.search(content) or any("org.junit" in i for i in imports):
            tags.append("JUnit")
        if _LOMBOK.search(content) or any(i.startswith("lombok") for i in imports):
            tags.append("Lombok")
        if _ANNOTATION.search(content):
            tags.append("Annotations")
        return tags


class KotlinAnalyzer(JavaAnalyzer):
    """Analyzer for Kotlin sources; shares Java's framework tags"""

    name = "kotlin"
    string_patterns = (DQ_STRING,)

    def extract_identifiers(self, content: str) -> Identifiers:
        return Identifiers.build(
            variables=find_all([_KOTLIN_PROPERTY], content),
            functions=find_all([_KOTLIN_FUN], content),
            classes=find_all([_KOTLIN_TYPE], content, re.M),
        )
