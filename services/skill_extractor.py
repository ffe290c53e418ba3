from typing import Dict, Iterable, List
import logging

logger = logging.getLogger(__name__)

# Matched as lowercase substrings, so short names like "r" or "go" will
# also hit inside longer words.
SKILL_TAXONOMY: Dict[str, List[str]] = {
    'programming': [
        'javascript', 'python', 'java', 'typescript', 'php', 'ruby', 'go', 'rust',
        'c++', 'c#', 'swift', 'kotlin', 'scala', 'perl', 'r', 'matlab'
    ],
    'frameworks': [
        'react', 'angular', 'vue', 'svelte', 'nodejs', 'express', 'django',
        'flask', 'spring', 'laravel', 'rails', 'nextjs', 'nuxt', 'gatsby'
    ],
    'tools': [
        'git', 'github', 'gitlab', 'docker', 'kubernetes', 'jenkins', 'circleci',
        'travis', 'terraform', 'ansible', 'webpack', 'babel', 'eslint'
    ],
    'databases': [
        'mysql', 'postgresql', 'mongodb', 'redis', 'sqlite', 'oracle',
        'cassandra', 'dynamodb', 'elasticsearch', 'firebase'
    ],
    'cloud': [
        'aws', 'azure', 'gcp', 'heroku', 'netlify', 'vercel', 'cloudflare',
        's3', 'ec2', 'lambda', 'cloudformation', 'terraform'
    ]
}

UNCATEGORIZED = 'other'


class SkillExtractor:
    def __init__(self, taxonomy: Dict[str, List[str]] = None):
        self.taxonomy = taxonomy or SKILL_TAXONOMY

    def extract(self, text: str) -> Dict[str, List[str]]:
        """
        Find taxonomy keywords in text, grouped by category.
        Only categories with at least one hit are returned.
        """
        text_lower = (text or "").lower()
        found: Dict[str, List[str]] = {}

        for category, keywords in self.taxonomy.items():
            hits = [keyword for keyword in keywords if keyword in text_lower]
            if hits:
                found[category] = hits

        logger.info(f"Fallback skill extraction found {sum(len(v) for v in found.values())} skills")
        return found

    def categorize(self, skills: Iterable[str]) -> Dict[str, List[str]]:
        """Group an externally supplied skill list into taxonomy categories"""
        categorized: Dict[str, List[str]] = {}
        for raw in skills:
            skill = str(raw).strip()
            if not skill:
                continue
            categories = [category for category, keywords in self.taxonomy.items()
                          if skill.lower() in keywords]
            if categories:
                skill = skill.lower()
            else:
                categories = [UNCATEGORIZED]
            for category in categories:
                bucket = categorized.setdefault(category, [])
                if skill not in bucket:
                    bucket.append(skill)
        return categorized
