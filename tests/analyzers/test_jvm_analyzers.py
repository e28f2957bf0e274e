"""Tests for the Java and Kotlin analyzers."""

from codeshape.analyzers import JavaAnalyzer, KotlinAnalyzer

JAVA_SOURCE = """\
package com.example.users;

import org.springframework.stereotype.Service;
import java.util.List;

@Service
public class UserService {
    private final UserRepository userRepository;
    private int maxResults = 50;

    public UserService(UserRepository userRepository) {
        this.userRepository = userRepository;
    }

    public List<User> findAll() {
        return userRepository.findAll();
    }
}
"""

KOTLIN_SOURCE = """\
package com.example

import kotlinx.coroutines.launch

data class User(val id: Int, val name: String)

class UserRepository {
    private val cache = mutableMapOf<Int, User>()
    fun findById(id: Int): User? = cache[id]
}
"""


class TestJavaAnalyzer:
    def setup_method(self):
        self.result = JavaAnalyzer().analyze(JAVA_SOURCE, "src/main/java/com/example/users/UserService.java")

    def test_identifiers(self):
        identifiers = self.result.identifiers
        assert identifiers.classes == ("UserService",)
        assert identifiers.functions == ("findAll",)
        assert identifiers.variables == ("userRepository", "maxResults")

    def test_statements_are_not_declarations(self):
        names = set(self.result.identifiers.variables) | set(self.result.identifiers.functions)
        assert not names & {"return", "package", "import", "this"}

    def test_indented_return_is_not_a_field(self):
        source = "class A {\n    int size() {\n        return count;\n    }\n}\n"
        assert JavaAnalyzer().analyze(source).identifiers.variables == ()

    def test_imports(self):
        assert [ref.specifier for ref in self.result.imports] == [
            "org.springframework.stereotype.Service",
            "java.util.List",
        ]

    def test_tags(self):
        assert self.result.tags == ("Spring Boot", "Annotations")

    def test_junit(self):
        source = "import org.junit.jupiter.api.Test;\n\nclass UserTest {\n    @Test\n    void loads() {}\n}\n"
        assert JavaAnalyzer().analyze(source).tags == ("JUnit", "Annotations")


class TestKotlinAnalyzer:
    def setup_method(self):
        self.result = KotlinAnalyzer().analyze(KOTLIN_SOURCE, "src/main/kotlin/User.kt")

    def test_identifiers(self):
        identifiers = self.result.identifiers
        assert identifiers.classes == ("User", "UserRepository")
        assert identifiers.functions == ("findById",)
        assert identifiers.variables == ("id", "name", "cache")

    def test_imports(self):
        assert [ref.specifier for ref in self.result.imports] == ["kotlinx.coroutines.launch"]
