"""Static skill taxonomy: category -> known lowercase skill keywords.

Category order is significant: skill lists, recommendations and the
detailed report all follow it.
"""

from types import MappingProxyType

SKILL_TAXONOMY: MappingProxyType[str, tuple[str, ...]] = MappingProxyType({
    "programming": (
        "javascript", "typescript", "python", "java", "c++", "ruby", "php",
        "scala", "kotlin", "swift", "rust", "golang",
    ),
    "frontend": (
        "react", "vue", "angular", "html", "css", "sass", "tailwind",
        "bootstrap", "material-ui", "webpack", "vite", "nextjs", "gatsby",
    ),
    "backend": (
        "node", "express", "django", "flask", "spring", "rails", "laravel",
        "asp.net", "fastapi", "graphql", "rest",
    ),
    "database": (
        "sql", "mysql", "postgresql", "mongodb", "redis", "elasticsearch",
        "dynamodb", "cassandra", "oracle", "sqlite",
    ),
    "cloud": (
        "aws", "azure", "gcp", "cloud", "docker", "kubernetes", "serverless",
        "terraform", "jenkins", "ci/cd", "devops",
    ),
    "testing": (
        "jest", "mocha", "cypress", "selenium", "testing", "tdd", "unit test",
        "integration test", "e2e test",
    ),
    "soft_skills": (
        "leadership", "communication", "teamwork", "problem-solving",
        "analytical", "project management", "agile", "scrum",
    ),
})

CATEGORY_LABELS: MappingProxyType[str, str] = MappingProxyType({
    "programming": "Programming languages",
    "frontend": "Frontend",
    "backend": "Backend",
    "database": "Databases",
    "cloud": "Cloud & DevOps",
    "testing": "Testing",
    "soft_skills": "Soft skills",
})

# One suggestion per category; {skills} is the comma-joined missing list
IMPROVEMENT_TEMPLATES: MappingProxyType[str, str] = MappingProxyType({
    "programming": "Show hands-on projects written in {skills}, including what you built and its impact",
    "frontend": "Add UI work built with {skills}, ideally with links to live demos or screenshots",
    "backend": "Describe services or APIs you implemented using {skills} and the traffic they handled",
    "database": "Mention data models, queries or migrations you owned with {skills}",
    "cloud": "Highlight deployments and infrastructure you managed with {skills}",
    "testing": "Call out test suites and quality practices you introduced with {skills}",
    "soft_skills": "Give concrete examples that demonstrate {skills}, such as teams led or processes improved",
})

OTHER_CATEGORY = "other"


def all_skills() -> list[str]:
    """Flatten the taxonomy into one ordered, duplicate-free keyword list."""
    seen: set[str] = set()
    flat: list[str] = []
    for skills in SKILL_TAXONOMY.values():
        for skill in skills:
            if skill not in seen:
                seen.add(skill)
                flat.append(skill)
    return flat


def category_label(category: str) -> str:
    return CATEGORY_LABELS.get(category, category.replace("_", " ").capitalize())
