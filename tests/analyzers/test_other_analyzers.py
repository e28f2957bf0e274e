"""Tests for the Ruby, Swift, C# and generic analyzers and language dispatch."""

import pytest

from codeshape.analyzers import (
    ANALYZERS,
    EMPTY_RESULT,
    CSharpAnalyzer,
    GenericAnalyzer,
    ImportKind,
    Language,
    ModuleRef,
    RubyAnalyzer,
    SwiftAnalyzer,
    get_analyzer,
    is_source,
    language_for,
)
from codeshape.scanning import FileType

RUBY_SOURCE = """\
require 'json'
require_relative 'models/user'

=begin
class Hidden
end
=end

class UsersController < ApplicationController
  MAX_PAGE = 50

  # def commented_out
  def index
    @users = User.all
  end

  def self.build!
  end
end
"""

SWIFT_SOURCE = """\
import SwiftUI
import Combine

protocol Describable {
    func describe() -> String
}

struct ContentView: View {
    let title = "Home"
    var body: some View { Text(title) }
}

extension ContentView: Describable {
    func describe() -> String { return title }
}
"""

CSHARP_SOURCE = """\
using System;
using Microsoft.AspNetCore.Mvc;
using Microsoft.EntityFrameworkCore;

namespace Shop.Controllers
{
    public class OrdersController : ControllerBase
    {
        private readonly ShopContext _context;
        public int PageSize { get; set; }

        public async Task<IActionResult> GetOrders()
        {
            return Ok(await _context.Orders.ToListAsync());
        }
    }
}
"""


class TestRubyAnalyzer:
    def setup_method(self):
        self.result = RubyAnalyzer().analyze(RUBY_SOURCE, "app/controllers/users_controller.rb")

    def test_identifiers(self):
        identifiers = self.result.identifiers
        assert identifiers.classes == ("UsersController",)
        assert identifiers.functions == ("index", "build!")
        assert identifiers.variables == ("MAX_PAGE", "users")

    def test_require_kinds(self):
        assert self.result.imports == (
            ModuleRef("json", ImportKind.ABSOLUTE),
            ModuleRef("./models/user", ImportKind.RELATIVE),
        )

    def test_tags(self):
        assert self.result.tags == ("Ruby on Rails",)

    def test_rspec(self):
        source = "require 'rspec'\n\ndescribe User do\n  it 'works' do\n  end\nend\n"
        assert RubyAnalyzer().analyze(source).tags == ("RSpec",)


class TestSwiftAnalyzer:
    def setup_method(self):
        self.result = SwiftAnalyzer().analyze(SWIFT_SOURCE, "App/ContentView.swift")

    def test_identifiers(self):
        identifiers = self.result.identifiers
        assert identifiers.classes == ("Describable", "ContentView")
        assert identifiers.functions == ("describe",)
        assert identifiers.variables == ("title", "body")

    def test_imports(self):
        assert [ref.specifier for ref in self.result.imports] == ["SwiftUI", "Combine"]

    def test_tags(self):
        assert self.result.tags == ("SwiftUI", "Combine", "Protocol-Oriented Programming")


class TestCSharpAnalyzer:
    def setup_method(self):
        self.result = CSharpAnalyzer().analyze(CSHARP_SOURCE, "Controllers/OrdersController.cs")

    def test_identifiers(self):
        identifiers = self.result.identifiers
        assert identifiers.classes == ("OrdersController",)
        assert "GetOrders" in identifiers.functions
        assert identifiers.variables == ("_context", "PageSize")

    def test_imports(self):
        assert [ref.specifier for ref in self.result.imports] == [
            "System",
            "Microsoft.AspNetCore.Mvc",
            "Microsoft.EntityFrameworkCore",
        ]

    def test_tags(self):
        assert self.result.tags == ("ASP.NET Core", "Entity Framework")


class TestLanguageDispatch:
    @pytest.mark.parametrize(
        "file_type,language",
        [
            (FileType.JAVASCRIPT, Language.JAVASCRIPT),
            (FileType.JAVASCRIPT_REACT, Language.JAVASCRIPT),
            (FileType.TYPESCRIPT_REACT, Language.TYPESCRIPT),
            (FileType.KOTLIN, Language.KOTLIN),
            (FileType.RUST, Language.GENERIC),
            (FileType.JSON, Language.GENERIC),
        ],
    )
    def test_language_for(self, file_type, language):
        assert language_for(file_type) == language
        assert get_analyzer(file_type) is ANALYZERS[language]

    def test_every_language_has_an_analyzer(self):
        assert set(ANALYZERS) == set(Language)

    def test_unsupported_types_are_not_source(self):
        assert is_source(FileType.PYTHON)
        assert not is_source(FileType.RUST)
        assert not is_source(FileType.DOCUMENTATION)

    def test_generic_analyzer_is_empty(self):
        assert GenericAnalyzer().analyze("fn main() { let x = 1; }") == EMPTY_RESULT
