"""Static reference data for category consolidation.

SYNONYM_GROUPS holds sets of interchangeable domain terms. Two labels that
each use a word from the same group are bridged when the rest of their words
still overlap ("Invoice 2024" / "Receipt 2024").

All words are normalized and longer than two characters, since they are
compared against significant words only.
"""

import re
from typing import FrozenSet, Tuple

SYNONYM_GROUPS: Tuple[FrozenSet[str], ...] = (
    # Financial
    frozenset({
        'invoice', 'invoices', 'receipt', 'receipts', 'bill', 'bills',
        'billing', 'payment', 'payments', 'statement', 'statements',
        'transaction', 'transactions', 'expense', 'expenses', 'financial',
        'finance', 'finances', 'accounting', 'budget', 'tax', 'taxes',
        'payroll', 'purchase', 'order',
    }),
    # Legal
    frozenset({
        'contract', 'contracts', 'agreement', 'agreements', 'legal', 'terms',
        'nda', 'lease', 'license', 'policy', 'policies', 'compliance',
        'regulation', 'regulations',
    }),
    # HR and careers
    frozenset({
        'resume', 'resumes', 'curriculum', 'vitae', 'cover', 'application',
        'applications', 'candidate', 'hiring', 'recruitment', 'employee',
        'employment', 'onboarding', 'personnel',
    }),
    # Technical
    frozenset({
        'code', 'source', 'script', 'scripts', 'program', 'software',
        'documentation', 'docs', 'api', 'manual', 'manuals', 'guide',
        'guides', 'tutorial', 'tutorials', 'technical', 'specification',
        'configuration', 'config', 'settings',
    }),
    # Reporting
    frozenset({
        'report', 'reports', 'summary', 'summaries', 'analysis', 'review',
        'overview', 'assessment', 'findings', 'evaluation',
    }),
    # Correspondence
    frozenset({
        'letter', 'letters', 'email', 'emails', 'mail', 'memo', 'memos',
        'correspondence', 'message', 'messages', 'note', 'notice',
    }),
    # Meetings
    frozenset({
        'meeting', 'meetings', 'minutes', 'agenda', 'notes', 'discussion',
    }),
    # Sales and marketing
    frozenset({
        'marketing', 'sales', 'advertising', 'promotion', 'promotional',
        'brochure', 'flyer', 'campaign', 'proposal', 'quotation', 'quote',
        'copy',
    }),
    # Presentations
    frozenset({
        'presentation', 'presentations', 'slides', 'slide', 'deck',
        'slideshow', 'powerpoint', 'keynote',
    }),
    # Spreadsheets and data
    frozenset({
        'spreadsheet', 'spreadsheets', 'sheet', 'workbook', 'excel',
        'dataset', 'datasets', 'data', 'table', 'tables', 'csv',
    }),
    # Images
    frozenset({
        'image', 'images', 'photo', 'photos', 'photograph', 'picture',
        'pictures', 'screenshot', 'screenshots', 'graphic', 'graphics',
        'scan', 'scanned',
    }),
    # Personal and identity
    frozenset({
        'personal', 'identity', 'passport', 'license', 'certificate',
        'certificates', 'certification',
    }),
    # Education
    frozenset({
        'research', 'paper', 'papers', 'article', 'articles', 'thesis',
        'study', 'studies', 'academic', 'lecture', 'course', 'homework',
        'assignment',
    }),
    # Medical
    frozenset({
        'medical', 'health', 'healthcare', 'prescription', 'lab', 'clinical',
        'patient', 'insurance',
    }),
)


# Bucket that image-like labels are forced into.
IMAGES_BUCKET = "Images"

IMAGE_TERMS: Tuple[str, ...] = (
    'image', 'photo', 'picture', 'graphic', 'svg', 'scalable vector graphic',
    'png', 'jpg', 'jpeg', 'gif', 'bmp', 'tiff', 'webp',
)

# Matched against normalized labels, so '_' and '.' already separate words.
# Exact terms only: "Photos" and "Graphics" are not image-like.
IMAGE_LABEL_RE = re.compile(
    r'\b(?:' + '|'.join(re.escape(t) for t in IMAGE_TERMS) + r')\b',
    re.IGNORECASE,
)
