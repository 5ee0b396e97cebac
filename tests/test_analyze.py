import os

import pytest
from pydantic import ValidationError

from warden.analyze import analyze_file, analyze_source
from warden.errors import InputError


BADLY_FORMATTED = """/**
 * @file example.hpp
 *
 * @brief Example of a badly formatted file.
 */

// Bare include: This include does not have any accompanying comments
#include <iostream>
        #INCLUDE <FMT/CORE.H>

// Unused functions listed as comments: std::find is not used within the file
#include <algorithm>  //     for std::find

// Unused functions listed as comments: std::transform, std::back_inserter are not used
    #INCLUDE <ITERATOR>  // for std::back_inserter, std::transform

// OK: This include is correctly documented with the used functions listed in the comments
#include <string>  // for std::string,    std::to_string
#include <vector>  // for   std::vector

// OK: uses "std::string", "std::to_string" and "std::vector"
std::vector<STD::STRING> foo(const std::vector<int> &vec)
{
    std::vector<std::string> result;
    for (const auto &i : vec) {
        result.emplace_back(std::to_string(i));
    }
    return result;
}

// Unlisted function: uses "std::sort", which is not listed after the includes
std::vector<int> bar(const std::vector<int> &v)
{
    std::vector<int> result(v);
    STD::SORT(RESULT.BEGIN(), RESULT.END());
    return result;
}
"""

NO_ISSUES = """/**
 * @file shell.hpp
 *
 * @brief Run shell commands.
 */

#pragma once

#include <stdexcept>  // for std::runtime_error
#include <string>     // for std::string

namespace core::shell {

class PathError : public std::runtime_error {
  public:
    explicit PathError(const std::string &message)
        : std::runtime_error(message) {}
};

[[nodiscard]] std::string build_command(const std::string &filepath);

// The output can be printed using std::cout.
/**
 * The output can be printed using std::cout.
 */

}  // namespace core::shell"""

UNUSED = """  #include<string>//std::string,std::to_string
#INCLUDE <IOSTREAM>      //     STD::COUT
#INCLUDE <vector>//std::vector
#include <ALGORITHM>//for std::find, STD::TRANSFORM, std::back_inserter
#include <cstddef>        // for std::size_t,        std::nullptr_t

const std::size_t pi = 3.14159;
std::cout << "Hello world!\\n";"""

UNLISTED = """#include <iostream>  // for std::cout
// #include <cstddef>  // for std::size_t
const std::size_t pi = 3.14159;
std::sort(v.begin(), v.end());
std::cout << "Hello world!\\n";"""


def write(tmp_path, name, text):
	p = tmp_path / name
	p.write_text(text, encoding="utf-8")
	return str(p)


def test_badly_formatted(tmp_path):
	report = analyze_file(write(tmp_path, "badly_formatted.cpp", BADLY_FORMATTED))

	assert [(b.line.number, b.line.text, b.directive) for b in report.bare_includes] == [
		(8, "#include <iostream>", "#include <iostream>"),
		(9, "        #INCLUDE <FMT/CORE.H>", "#include <fmt/core.h>"),
	]
	assert [(u.line.number, u.line.text, u.symbols) for u in report.unused_symbols] == [
		(12, "#include <algorithm>  //     for std::find", ["std::find"]),
		(
			15,
			"    #INCLUDE <ITERATOR>  // for std::back_inserter, std::transform",
			["std::back_inserter", "std::transform"],
		),
	]
	assert [(u.line.number, u.line.text, u.symbol, u.link) for u in report.unlisted_symbols] == [
		(
			35,
			"    STD::SORT(RESULT.BEGIN(), RESULT.END());",
			"std::sort",
			"https://duckduckgo.com/?sites=cppreference.com&q=std%3A%3Asort&ia=web",
		),
	]
	assert not report.is_clean


def test_no_issues(tmp_path):
	report = analyze_file(write(tmp_path, "shell.hpp", NO_ISSUES))
	assert report.bare_includes == []
	assert report.unused_symbols == []
	assert report.unlisted_symbols == []
	assert report.is_clean


def test_unused(tmp_path):
	report = analyze_file(write(tmp_path, "unused.cpp", UNUSED))
	assert report.bare_includes == []
	assert [(u.line.number, u.symbols) for u in report.unused_symbols] == [
		(1, ["std::string", "std::to_string"]),
		(3, ["std::vector"]),
		(4, ["std::find", "std::transform", "std::back_inserter"]),
		(5, ["std::nullptr_t"]),
	]
	assert report.unlisted_symbols == []


def test_unlisted(tmp_path):
	report = analyze_file(write(tmp_path, "unlisted.cpp", UNLISTED))
	assert report.bare_includes == []
	assert report.unused_symbols == []
	assert [(u.line.number, u.line.text, u.symbol) for u in report.unlisted_symbols] == [
		(3, "const std::size_t pi = 3.14159;", "std::size_t"),
		(4, "std::sort(v.begin(), v.end());", "std::sort"),
	]
	assert report.unlisted_symbols[0].link.endswith("q=std%3A%3Asize_t&ia=web")


def test_plain_file_has_no_findings():
	report = analyze_source("plain.c", "int main(void)\n{\n    return 0;\n}\n")
	assert report.is_clean


def test_empty_file(tmp_path):
	report = analyze_file(write(tmp_path, "empty.cpp", ""))
	assert report.is_clean


def test_scenario_bare_include_alone():
	report = analyze_source("a.cpp", "#include <iostream>")
	assert [b.line.number for b in report.bare_includes] == [1]
	assert report.unused_symbols == []
	assert report.unlisted_symbols == []


def test_scenario_listed_and_used():
	report = analyze_source("b.cpp", "#include <algorithm>  // for std::sort\nstd::vector<int> v; std::sort(v);")
	assert report.bare_includes == []
	assert report.unused_symbols == []
	# std::vector is used but listed nowhere
	assert [u.symbol for u in report.unlisted_symbols] == ["std::vector"]


def test_scenario_partially_used():
	report = analyze_source("c.cpp", "#include <algorithm>  // for std::sort, std::find\nstd::sort(v);")
	assert len(report.unused_symbols) == 1
	assert report.unused_symbols[0].line.number == 1
	assert report.unused_symbols[0].directive == "#include <algorithm>"
	assert report.unused_symbols[0].symbols == ["std::find"]


def test_scenario_unlisted_case_folded():
	report = analyze_source("d.cpp", "x = STD::SORT(v);")
	assert len(report.unlisted_symbols) == 1
	assert report.unlisted_symbols[0].symbol == "std::sort"
	assert report.unlisted_symbols[0].line.text == "x = STD::SORT(v);"
	assert report.unlisted_symbols[0].link


def test_scenario_comments_are_not_usages():
	report = analyze_source("e.cpp", "// use std::sort here\nint x = 5; // use std::sort to sort\n")
	assert report.is_clean


def test_include_listed_after_use():
	report = analyze_source("f.cpp", "std::cout << 1;\n#include <iostream>  // for std::cout\n")
	assert report.is_clean


def test_findings_are_in_line_order():
	text = "\n".join(
		[
			"std::sort(a);",
			"#include <map>",
			"std::sort(b);",
			"#include <set>",
			"#include <x>  // std::a",
			"#include <y>  // std::b",
		]
	)
	report = analyze_source("g.cpp", text)
	assert [b.line.number for b in report.bare_includes] == [2, 4]
	assert [u.line.number for u in report.unused_symbols] == [5, 6]
	assert [u.line.number for u in report.unlisted_symbols] == [1, 3]


def test_missing_file_raises(tmp_path):
	with pytest.raises(InputError) as exc:
		analyze_file(str(tmp_path / "nope.cpp"))
	assert "does not exist" in str(exc.value)


def test_directory_raises(tmp_path):
	with pytest.raises(InputError) as exc:
		analyze_file(str(tmp_path))
	assert "directory" in exc.value.reason


def test_scenario_unqualified_code_is_not_a_usage():
	report = analyze_source("b2.cpp", "#include <algorithm>  // for std::sort\nvector<int> v; std::sort(v);")
	assert report.is_clean


def test_same_unlisted_symbol_twice_on_one_line():
	report = analyze_source("h.cpp", "std::sort(a); std::sort(b);")
	assert [(u.line.number, u.symbol) for u in report.unlisted_symbols] == [
		(1, "std::sort"),
		(1, "std::sort"),
	]


def test_lone_carriage_return_does_not_split_lines(tmp_path):
	text = "int a; /* x */\rstd::sort(v);\nstd::cout << 1;\r\n"
	p = tmp_path / "cr.cpp"
	p.write_bytes(text.encode("utf-8"))

	from_file = analyze_file(str(p))
	from_text = analyze_source(str(p), text)
	assert from_file == from_text
	assert [(u.line.number, u.line.text) for u in from_file.unlisted_symbols] == [
		(1, "int a; /* x */\rstd::sort(v);"),
		(2, "std::cout << 1;"),
	]


def test_undecodable_file_raises(tmp_path):
	p = tmp_path / "latin1.cpp"
	p.write_bytes(b"// caf\xe9\nstd::sort(v);\n")
	with pytest.raises(InputError) as exc:
		analyze_file(str(p))
	assert "UTF-8" in exc.value.reason


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="needs named pipes")
def test_fifo_raises(tmp_path):
	p = tmp_path / "pipe.cpp"
	os.mkfifo(str(p))
	with pytest.raises(InputError) as exc:
		analyze_file(str(p))
	assert "not a regular file" in exc.value.reason


def test_report_is_immutable():
	report = analyze_source("i.cpp", "#include <iostream>")
	with pytest.raises(ValidationError):
		report.path = "other.cpp"
