"""Shared fixtures for the finder tests."""

import pytest

SAMPLE_XML = """<?xml version="1.0" ?>
<PubmedArticleSet>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
      <PMID Version="1">38000001</PMID>
      <Article PubModel="Print">
        <ArticleTitle>Targeting <i>KRAS</i> in pancreatic cancer.</ArticleTitle>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y">
            <LastName>Smith</LastName>
            <ForeName>Jane</ForeName>
            <Initials>J</Initials>
            <AffiliationInfo>
              <Affiliation>Acme Pharmaceuticals Inc, Boston, MA. jsmith@acmepharma.com</Affiliation>
            </AffiliationInfo>
          </Author>
          <Author ValidYN="Y">
            <LastName>Doe</LastName>
            <Initials>A</Initials>
            <AffiliationInfo>
              <Affiliation>Harvard University, Cambridge, MA.</Affiliation>
            </AffiliationInfo>
            <AffiliationInfo>
              <Affiliation>Genentech Inc, South San Francisco, CA.</Affiliation>
            </AffiliationInfo>
          </Author>
          <Author ValidYN="Y">
            <CollectiveName>KRAS Study Group</CollectiveName>
          </Author>
        </AuthorList>
      </Article>
      <CommentsCorrectionsList>
        <CommentsCorrections RefType="CommentIn">
          <PMID Version="1">37999999</PMID>
        </CommentsCorrections>
      </CommentsCorrectionsList>
    </MedlineCitation>
    <PubmedData>
      <History>
        <PubMedPubDate PubStatus="received">
          <Year>2023</Year>
          <Month>6</Month>
          <Day>2</Day>
        </PubMedPubDate>
        <PubMedPubDate PubStatus="pubmed">
          <Year>2023</Year>
          <Month>11</Month>
          <Day>20</Day>
        </PubMedPubDate>
      </History>
    </PubmedData>
  </PubmedArticle>
  <PubmedArticle>
    <MedlineCitation Status="MEDLINE" Owner="NLM">
      <PMID Version="1">38000002</PMID>
      <Article PubModel="Print">
        <ArticleTitle>Outcomes of a cohort study.</ArticleTitle>
        <AuthorList CompleteYN="Y">
          <Author ValidYN="Y">
            <LastName>Lee</LastName>
            <ForeName>Min</ForeName>
            <AffiliationInfo>
              <Affiliation>Johns Hopkins University School of Medicine, Baltimore, MD.</Affiliation>
            </AffiliationInfo>
          </Author>
        </AuthorList>
      </Article>
    </MedlineCitation>
    <PubmedData>
      <History>
        <PubMedPubDate PubStatus="entrez">
          <Year>2023</Year>
        </PubMedPubDate>
      </History>
    </PubmedData>
  </PubmedArticle>
  <PubmedArticle>
    <MedlineCitation Status="In-Data-Review" Owner="NLM">
      <PMID Version="1">38000003</PMID>
    </MedlineCitation>
  </PubmedArticle>
</PubmedArticleSet>
"""


@pytest.fixture
def sample_xml():
    return SAMPLE_XML


def make_author(last_name=None, fore_name=None, initials=None, collective_name=None,
                affiliations=None):
    """Build a parsed author entry the way the XML parser produces it."""
    return {
        "last_name": last_name,
        "fore_name": fore_name,
        "initials": initials,
        "collective_name": collective_name,
        "affiliation_info": [{"affiliation": a} for a in affiliations] if affiliations else None,
    }


def make_record(pubmed_id="1", title="A paper", authors=None, history=None):
    return {
        "pubmed_id": pubmed_id,
        "title": title,
        "authors": authors,
        "publication_history": history or [],
    }
