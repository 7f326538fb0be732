import logging

import pytest

from sdnames.config.dns_name_config import DnsNameSplitConfig
from sdnames.discovery.dns_name_info import DnsNameInfo, DnsNameKind
from sdnames.discovery.dns_name_splitter import (
    DnsNameSplitter,
    split_full_dns_name,
    split_subtypes,
)

# A mix of well-formed and odd names used by the property-style tests.
SAMPLE_NAMES = [
    "",
    ".",
    "localhost",
    "host.example.com",
    "host.example.com.",
    ".example.com",
    "_service._udp.example.com.",
    "_http._tcp.local",
    "myinstance._service._udp.example.com.",
    "myinstance,subA,subB._service._udp.example.com.",
    "_meshcop._udp,_sub1.default.service.arpa.",
    "My.Printer._ipp._tcp.local.",
    "._udp.local.",
    "._svc._udp.local.",
    "_svc._tcp.my,domain.",
    "inst,,a._svc._udp.local.",
    "a,b,c",
    "_x._udp._y._tcp.local.",
    "inst,a._udp,b.local",
    "a,b.c._svc._udp.local",
]


class TestSplitSubtypes:

    def test_multiple_subtypes(self):
        assert split_subtypes(",a,b,c") == ["a", "b", "c"]

    def test_single_subtype(self):
        assert split_subtypes(",a") == ["a"]

    def test_no_comma_yields_nothing(self):
        assert split_subtypes("abc") == []
        assert split_subtypes("") == []

    def test_empty_entries_are_kept(self):
        assert split_subtypes(",a,,b,") == ["a", "", "b", ""]

    def test_entry_count_matches_comma_count(self):
        for fragment in [",", ",,", ",x,y", ",_printer,,_color,"]:
            assert len(split_subtypes(fragment)) == fragment.count(",")

    def test_appends_to_existing_list(self):
        existing = ["first"]
        result = split_subtypes(",second,third", existing)

        assert result is existing
        assert existing == ["first", "second", "third"]

    def test_text_before_first_comma_is_skipped(self):
        assert split_subtypes("ignored,a,b") == ["a", "b"]

    def test_custom_separator(self):
        assert split_subtypes("~a~b", separator="~") == ["a", "b"]


class TestHostNames:

    def test_host_name(self):
        info = split_full_dns_name("host.example.com")

        assert info.host_name == "host"
        assert info.domain == "example.com."
        assert info.service_name is None
        assert info.instance_name is None
        assert info.subtypes == ()
        assert info.kind is DnsNameKind.HOST

    def test_dot_terminated_host_name(self):
        info = split_full_dns_name("host.example.com.")

        assert info.host_name == "host"
        assert info.domain == "example.com."

    def test_single_label_is_host_in_root_domain(self):
        info = split_full_dns_name("localhost")

        assert info.host_name == "localhost"
        assert info.domain == "."
        assert info.is_host()

    def test_empty_name_is_unrecognized(self):
        info = split_full_dns_name("")

        assert info.kind is DnsNameKind.UNRECOGNIZED
        assert info.host_name is None
        assert info.domain == "."

    def test_leading_dot_is_unrecognized(self):
        info = split_full_dns_name(".example.com")

        assert info.kind is DnsNameKind.UNRECOGNIZED
        assert info.domain == "example.com."

    def test_commas_in_host_name_are_not_subtypes(self):
        info = split_full_dns_name("a,b,c")

        assert info.host_name == "a,b,c"
        assert info.subtypes == ()


class TestServiceNames:

    def test_udp_service(self):
        info = split_full_dns_name("_service._udp.example.com.")

        assert info.service_name == "_service._udp"
        assert info.domain == "example.com."
        assert info.host_name is None
        assert info.instance_name is None
        assert info.kind is DnsNameKind.SERVICE

    def test_tcp_service_without_trailing_dot(self):
        info = split_full_dns_name("_http._tcp.local")

        assert info.service_name == "_http._tcp"
        assert info.domain == "local."

    def test_service_without_domain(self):
        info = split_full_dns_name("_http._tcp")

        assert info.service_name == "_http._tcp"
        assert info.domain == "."

    def test_subtypes_after_transport_label(self):
        info = split_full_dns_name("_meshcop._udp,_sub1,_sub2.default.service.arpa.")

        assert info.service_name == "_meshcop._udp"
        assert info.subtypes == ("_sub1", "_sub2")
        assert info.domain == "default.service.arpa."
        assert info.is_service()

    def test_marker_at_start(self):
        info = split_full_dns_name("._udp.local.")

        assert info.service_name == "._udp"
        assert info.domain == "local."
        assert info.is_service()

    def test_empty_instance_label_is_service(self):
        info = split_full_dns_name("._svc._udp.local.")

        assert info.service_name == "_svc._udp"
        assert info.instance_name is None
        assert info.kind is DnsNameKind.SERVICE

    def test_udp_marker_takes_priority_over_tcp(self):
        info = split_full_dns_name("_x._udp._y._tcp.local.")

        assert info.service_name == "_x._udp"
        assert info.domain == "_y._tcp.local."

    def test_comma_in_domain_is_not_a_subtype(self):
        info = split_full_dns_name("_svc._tcp.my,domain.")

        assert info.service_name == "_svc._tcp"
        assert info.subtypes == ()
        assert info.domain == "my,domain."


class TestServiceInstanceNames:

    def test_service_instance(self):
        info = split_full_dns_name("myinstance._service._udp.example.com.")

        assert info.instance_name == "myinstance"
        assert info.service_name == "_service._udp"
        assert info.domain == "example.com."
        assert info.host_name is None
        assert info.kind is DnsNameKind.SERVICE_INSTANCE

    def test_service_instance_with_subtypes(self):
        info = split_full_dns_name(
            "myinstance,subA,subB._service._udp.example.com."
        )

        assert info.subtypes == ("subA", "subB")
        assert info.instance_name == "myinstance"
        assert info.service_name == "_service._udp"
        assert info.domain == "example.com."

    def test_empty_subtype_entries(self):
        info = split_full_dns_name("inst,,a._svc._udp.local.")

        assert info.instance_name == "inst"
        assert info.subtypes == ("", "a")

    def test_instance_label_with_dots(self):
        info = split_full_dns_name("My.Printer._ipp._tcp.local.")

        assert info.instance_name == "My.Printer"
        assert info.service_name == "_ipp._tcp"
        assert info.domain == "local."

    def test_subtype_lists_in_several_labels(self):
        info = split_full_dns_name("inst,a,b._svc._udp,c.local")

        assert info.instance_name == "inst"
        assert info.service_name == "_svc._udp"
        assert info.subtypes == ("a", "b", "c")
        assert info.domain == "local."

    def test_every_separator_before_domain_yields_a_subtype(self):
        name = "inst,a._udp,b.local"
        info = split_full_dns_name(name)

        assert info.subtypes == ("a", "b")
        assert info.service_name == "inst._udp"
        assert info.domain == "local."
        assert len(info.subtypes) == name.count(",")

    def test_subtype_list_is_cut_from_middle_of_instance(self):
        info = split_full_dns_name("a,b.c._svc._udp.local")

        assert info.instance_name == "a.c"
        assert info.service_name == "_svc._udp"
        assert info.subtypes == ("b",)

    def test_subtypes_after_transport_label_with_instance(self):
        info = split_full_dns_name("inst._svc._tcp,_a.local")

        assert info.instance_name == "inst"
        assert info.service_name == "_svc._tcp"
        assert info.subtypes == ("_a",)
        assert info.domain == "local."


class TestSplitterProperties:

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_domain_is_dot_terminated(self, name):
        assert split_full_dns_name(name).domain.endswith(".")

    @pytest.mark.parametrize("name", SAMPLE_NAMES)
    def test_at_most_one_shape_holds(self, name):
        info = split_full_dns_name(name)
        holding = [
            info.is_host(),
            info.is_service(),
            info.is_service_instance(),
        ]
        assert sum(holding) <= 1

    @pytest.mark.parametrize(
        "name", [n for n in SAMPLE_NAMES if not n.endswith(".")]
    )
    def test_trailing_dot_does_not_change_result(self, name):
        assert split_full_dns_name(name) == split_full_dns_name(name + ".")

    def test_documented_usage_example(self):
        info = split_full_dns_name("myinstance,subA._service._udp.example.com")

        assert info.instance_name == "myinstance"
        assert info.service_name == "_service._udp"
        assert info.subtypes == ("subA",)
        assert info.domain == "example.com."

    def test_input_is_not_mutated(self):
        name = "host.example.com"
        split_full_dns_name(name)
        assert name == "host.example.com"


class TestDnsNameSplitter:

    def test_default_config(self):
        splitter = DnsNameSplitter()
        assert splitter.split("_a._tcp.local.") == DnsNameInfo(
            domain="local.", service_name="_a._tcp"
        )

    def test_custom_transport_markers(self):
        splitter = DnsNameSplitter(DnsNameSplitConfig(transport_markers=("._tcp",)))
        info = splitter.split("_svc._udp.local")

        assert info.host_name == "_svc"
        assert info.domain == "_udp.local."

    def test_custom_subtype_separator(self):
        splitter = DnsNameSplitter(DnsNameSplitConfig(subtype_separator="~"))
        info = splitter.split("inst~a~b._svc._udp.local.")

        assert info.instance_name == "inst"
        assert info.subtypes == ("a", "b")

    def test_invalid_config_type(self):
        with pytest.raises(TypeError):
            DnsNameSplitter(config={"subtype_separator": ","})  # type: ignore[arg-type]

    @pytest.mark.parametrize("bad_name", [None, 42, b"host.local."])
    def test_non_string_name_raises_type_error(self, bad_name):
        with pytest.raises(TypeError):
            DnsNameSplitter().split(bad_name)

    def test_unrecognized_name_is_logged(self, caplog):
        with caplog.at_level(
            logging.DEBUG, logger="sdnames.discovery.dns_name_splitter"
        ):
            DnsNameSplitter().split(".example.com")

        assert "Unrecognized DNS name '.example.com'" in caplog.text

    def test_recognized_name_is_not_logged(self, caplog):
        with caplog.at_level(
            logging.DEBUG, logger="sdnames.discovery.dns_name_splitter"
        ):
            DnsNameSplitter().split("host.example.com")

        assert caplog.text == ""
