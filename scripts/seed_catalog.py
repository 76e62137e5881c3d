#!/usr/bin/env python3
"""
Catalog Seed Script

Upserts a sample set of job roles and scholarships into MongoDB
and creates the indexes the API expects.

- Job roles are keyed by title, scholarships by name, so re-running
  updates the existing documents instead of duplicating them.
- courseTags are stored lower-case (the API lower-cases what it queries with).

Usage: python scripts/seed_catalog.py
"""
import sys
sys.path.insert(0, '.')

from pymongo import UpdateOne

from careercraft.core.config import get_settings
from careercraft.db.mongodb import COLLECTIONS, connect_mongo, init_mongo_indexes


# ============================================================
# SAMPLE DATA
# ============================================================

JOB_ROLES = [
    {
        "title": "Software Engineer",
        "domain": "Engineering",
        "salaryRangeInr": {"min": 400000, "max": 1800000},
        "requiredSkills": ["Data structures", "Python or Java", "Git", "System design basics"],
        "demandLevel": "High",
        "courseTags": ["Computer Science", "Information Technology"]
    },
    {
        "title": "Data Analyst",
        "domain": "Engineering",
        "salaryRangeInr": {"min": 350000, "max": 1200000},
        "requiredSkills": ["SQL", "Excel", "Statistics", "Data visualisation"],
        "demandLevel": "High",
        "courseTags": ["Computer Science", "Data Science", "Statistics"]
    },
    {
        "title": "Mechanical Design Engineer",
        "domain": "Engineering",
        "salaryRangeInr": {"min": 300000, "max": 900000},
        "requiredSkills": ["CAD", "GD&T", "Material selection"],
        "demandLevel": "Medium",
        "courseTags": ["Mechanical"]
    },
    {
        "title": "Site Engineer",
        "domain": "Engineering",
        "salaryRangeInr": {"min": 250000, "max": 700000},
        "requiredSkills": ["AutoCAD", "Surveying", "Estimation"],
        "demandLevel": "Medium",
        "courseTags": ["Civil"]
    },
    {
        "title": "Embedded Systems Engineer",
        "domain": "Engineering",
        "salaryRangeInr": {"min": 350000, "max": 1100000},
        "requiredSkills": ["C", "Microcontrollers", "Circuit debugging"],
        "demandLevel": "Medium",
        "courseTags": ["Electronics", "Electrical"]
    },
    {
        "title": "Staff Nurse",
        "domain": "Medical",
        "salaryRangeInr": {"min": 250000, "max": 600000},
        "requiredSkills": ["Patient care", "Clinical procedures", "Communication"],
        "demandLevel": "High",
        "courseTags": ["Nursing"]
    },
    {
        "title": "Pharmacist",
        "domain": "Medical",
        "salaryRangeInr": {"min": 250000, "max": 700000},
        "requiredSkills": ["Pharmacology", "Dispensing", "Inventory management"],
        "demandLevel": "Medium",
        "courseTags": ["Pharmacy"]
    },
    {
        "title": "Chartered Accountant",
        "domain": "Commerce",
        "salaryRangeInr": {"min": 700000, "max": 2000000},
        "requiredSkills": ["Accounting standards", "Taxation", "Auditing"],
        "demandLevel": "High",
        "courseTags": ["Commerce", "Accounting"]
    },
    {
        "title": "Financial Analyst",
        "domain": "Commerce",
        "salaryRangeInr": {"min": 450000, "max": 1400000},
        "requiredSkills": ["Financial modelling", "Excel", "Valuation"],
        "demandLevel": "Medium",
        "courseTags": ["Commerce", "Economics", "Finance"]
    },
    {
        "title": "UX Designer",
        "domain": "Design",
        "salaryRangeInr": {"min": 400000, "max": 1500000},
        "requiredSkills": ["User research", "Wireframing", "Figma"],
        "demandLevel": "Medium",
        "courseTags": ["Design", "Fine Arts"]
    },
    {
        "title": "Content Writer",
        "domain": "Arts",
        "salaryRangeInr": {"min": 200000, "max": 600000},
        "requiredSkills": ["Writing", "Research", "SEO basics"],
        "demandLevel": "Low",
        "courseTags": ["English", "Journalism"]
    },
]

SCHOLARSHIPS = [
    {
        "name": "Central Sector Scheme of Scholarships",
        "url": "https://scholarships.gov.in",
        "category": "Merit",
        "academicLevel": "Undergraduate",
        "deadline": "2026-10-31",
        "amountInr": {"min": 12000, "max": 20000},
        "eligibility": "Above 80th percentile in Class 12, family income below 4.5 LPA",
        "courseTags": ["Computer Science", "Mechanical", "Civil", "Electronics", "Commerce", "Nursing"]
    },
    {
        "name": "AICTE Pragati Scholarship for Girls",
        "url": "https://www.aicte-india.org/schemes/students-development-schemes",
        "category": "Women",
        "academicLevel": "Undergraduate",
        "amountInr": {"min": 50000, "max": 50000},
        "eligibility": "Girl students admitted to AICTE-approved technical degree programmes",
        "courseTags": ["Computer Science", "Mechanical", "Civil", "Electronics", "Electrical"]
    },
    {
        "name": "AICTE Pragati Scholarship for Girls (Diploma)",
        "url": "https://www.aicte-india.org/schemes/students-development-schemes",
        "category": "Women",
        "academicLevel": "Diploma",
        "amountInr": {"min": 50000, "max": 50000},
        "eligibility": "Girl students admitted to AICTE-approved diploma programmes",
        "courseTags": ["Mechanical", "Civil", "Electronics", "Electrical"]
    },
    {
        "name": "Post Matric Scholarship",
        "url": "https://scholarships.gov.in",
        "category": "Need-based",
        "academicLevel": "High School",
        "eligibility": "Family income below 2.5 LPA",
        "courseTags": ["Science", "Commerce", "Arts"]
    },
    {
        "name": "INSPIRE Scholarship for Higher Education",
        "url": "https://online-inspire.gov.in",
        "category": "Merit",
        "academicLevel": "Undergraduate",
        "amountInr": {"min": 80000, "max": 80000},
        "eligibility": "Top 1% in Class 12 board, pursuing natural or basic sciences",
        "courseTags": ["Physics", "Chemistry", "Mathematics", "Statistics"]
    },
    {
        "name": "GATE Postgraduate Scholarship",
        "url": "https://www.aicte-india.org",
        "category": "Merit",
        "academicLevel": "Postgraduate",
        "amountInr": {"min": 12400, "max": 12400},
        "eligibility": "Valid GATE score, admitted to M.E./M.Tech",
        "courseTags": ["Computer Science", "Mechanical", "Civil", "Electronics"]
    },
    {
        "name": "National Means-cum-Merit Scholarship",
        "url": "https://scholarships.gov.in",
        "category": "Need-based",
        "academicLevel": "Middle School",
        "amountInr": {"min": 12000, "max": 12000},
        "eligibility": "Class 8 students, family income below 3.5 LPA",
        "courseTags": ["Science", "Mathematics"]
    },
]


def normalized(doc: dict) -> dict:
    """Copy of doc with lower-case courseTags."""
    return {**doc, "courseTags": [tag.strip().lower() for tag in doc.get("courseTags", [])]}


def upsert_all(collection, docs: list, key: str) -> None:
    ops = [UpdateOne({key: doc[key]}, {"$set": normalized(doc)}, upsert=True) for doc in docs]
    result = collection.bulk_write(ops)
    print(f"    {collection.name}: {result.upserted_count} inserted, {result.modified_count} updated")


def main():
    settings = get_settings()
    print("=" * 50)
    print("CAREERCRAFT - SEED CATALOG")
    print("=" * 50)
    print(f"    URI: {settings.mongodb_uri}")
    print(f"    Database: {settings.mongodb_db}")

    client = connect_mongo()
    try:
        db = client[settings.mongodb_db]

        print("\n[1] Creating indexes...")
        init_mongo_indexes(db)
        print("    ✅ Indexes ready")

        print("\n[2] Upserting reference data...")
        upsert_all(db[COLLECTIONS["job_roles"]], JOB_ROLES, key="title")
        upsert_all(db[COLLECTIONS["scholarships"]], SCHOLARSHIPS, key="name")
    finally:
        client.close()

    print("\n" + "=" * 50)
    print("Seed complete!")
    print("=" * 50)


if __name__ == "__main__":
    main()
