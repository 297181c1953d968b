"""Scrape GitHub project boards and contribution calendars into typed records."""
