from warden.links import build_reference_link, encode_symbol


def test_link_for_std_symbol():
	assert (
		build_reference_link("std::sort")
		== "https://duckduckgo.com/?sites=cppreference.com&q=std%3A%3Asort&ia=web"
	)


def test_link_is_deterministic():
	assert build_reference_link("std::size_t") == build_reference_link("std::size_t")


def test_special_characters_are_encoded():
	assert encode_symbol("a b!#$&'()*+,/:;=?@[]") == (
		"a%20b%21%23%24%26%27%28%29%2A%2B%2C%2F%3A%3B%3D%3F%40%5B%5D"
	)


def test_other_characters_pass_through():
	assert encode_symbol("std_x-1.é~") == "std_x-1.é~"
	assert build_reference_link("").endswith("&q=&ia=web")
