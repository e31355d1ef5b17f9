"""Tests for the offline generation path."""

from traycer_lite.core.generator import make_offline_plan_and_code


class TestMakeOfflinePlanAndCode:
    def test_prime_example(self, prime_prompt):
        result = make_offline_plan_and_code(prime_prompt)

        assert len(result.plan) == 8
        assert result.plan[0] == "Restate goal: write a function to check prime numbers"
        assert result.plan[3] == "Design function signature and return type."
        assert result.code.startswith("export function isPrime(n: number): boolean {")
        assert "i * i <= n" in result.code

    def test_component(self):
        result = make_offline_plan_and_code("a react widget named Counter")
        assert result.plan[3] == "Sketch props and state; plan rendering."
        assert "export function Counter()" in result.code

    def test_component_fallback_name(self):
        result = make_offline_plan_and_code("jsx")
        assert "export function jsx()" in result.code

    def test_api(self):
        result = make_offline_plan_and_code("express endpoint for health")
        assert result.plan[3] == "Define route, method, request/response schema, and errors."
        assert "'/health'" in result.code

    def test_script(self):
        result = make_offline_plan_and_code("echo script")
        assert result.plan[3] == "Define CLI flags, usage, and I/O."
        assert result.code.startswith("#!/usr/bin/env node")

    def test_explicit_name_with_keyword_body(self):
        result = make_offline_plan_and_code("write function nthFib for fibonacci numbers")
        assert result.code.startswith("export function nthFib(n: number): number {")

    def test_to_dict(self, prime_prompt):
        data = make_offline_plan_and_code(prime_prompt).to_dict()
        assert set(data) == {"plan", "code"}
