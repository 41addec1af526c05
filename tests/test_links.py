import unittest

from guardybot.links import DOCS_BASE_URL, resolve_link


class ResolveLinkTests(unittest.TestCase):
    def test_ec2_finding(self) -> None:
        link = resolve_link("UnauthorizedAccess:EC2/SSHBruteForce")
        self.assertEqual(link, f"{DOCS_BASE_URL}ec2.html#unauthorizedaccess-ec2-sshbruteforce")

    def test_trojan_resolves_to_ec2_group(self) -> None:
        link = resolve_link("Trojan:EC2/BlackholeTraffic")
        self.assertEqual(link, f"{DOCS_BASE_URL}ec2.html#trojan-ec2-blackholetraffic")

    def test_iamuser_maps_to_iam_page(self) -> None:
        link = resolve_link("Recon:IAMUser/MaliciousIPCaller")
        self.assertEqual(link, f"{DOCS_BASE_URL}iam.html#recon-iam-maliciousipcaller")

    def test_s3_and_kubernetes(self) -> None:
        self.assertEqual(
            resolve_link("Policy:S3/BucketBlockPublicAccessDisabled"),
            f"{DOCS_BASE_URL}s3.html#policy-s3-bucketblockpublicaccessdisabled",
        )
        self.assertEqual(
            resolve_link("Execution:Kubernetes/ExecInKubeSystemPod"),
            f"{DOCS_BASE_URL}kubernetes.html#execution-kubernetes-execinkubesystempod",
        )

    def test_suffix_after_first_slash_is_kept(self) -> None:
        link = resolve_link("CryptoCurrency:EC2/BitcoinTool.B!DNS")
        self.assertEqual(link, f"{DOCS_BASE_URL}ec2.html#cryptocurrency-ec2-bitcointool.b!dns")

    def test_missing_category_logs_and_returns_empty(self) -> None:
        for finding_type in ("Foo", "Foo:EC2", "Foo/EC2:Bar"):
            with self.subTest(finding_type=finding_type):
                with self.assertLogs("guardybot.links", level="ERROR") as logs:
                    self.assertEqual(resolve_link(finding_type), "")
                self.assertIn(finding_type, logs.output[0])

    def test_unknown_category_fails_closed(self) -> None:
        with self.assertLogs("guardybot.links", level="ERROR") as logs:
            self.assertEqual(resolve_link("Persistence:UnknownService/Weird"), "")
        self.assertIn("unknownservice", logs.output[0])

    def test_empty_category_fails_closed(self) -> None:
        with self.assertLogs("guardybot.links", level="ERROR"):
            self.assertEqual(resolve_link("Recon:/Thing"), "")
