"""Shared fixtures for meal lookup tests."""

import pytest

from neis.meal.client import parse_document
from neis.meal.models import MealQuery

SAMPLE_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<mealServiceDietInfo>
<head>
<list_total_count>1</list_total_count>
<RESULT>
<CODE>INFO-000</CODE>
<MESSAGE>정상 처리되었습니다.</MESSAGE>
</RESULT>
</head>
<row>
<ATPT_OFCDC_SC_CODE>J10</ATPT_OFCDC_SC_CODE>
<SD_SCHUL_CODE>7530079</SD_SCHUL_CODE>
<MMEAL_SC_NM>중식</MMEAL_SC_NM>
<MLSV_YMD>20240315</MLSV_YMD>
<DDISH_NM><![CDATA[쌀밥 <br/>김치찌개(5.6.9)<br/>배추김치(9)<br/>  ]]></DDISH_NM>
<CAL_INFO><![CDATA[812.3 Kcal]]></CAL_INFO>
<NTR_INFO><![CDATA[탄수화물(g) : 120.5<br/>단백질(g) : 35.2<br/>비타민A(R.E) : 150.1]]></NTR_INFO>
</row>
</mealServiceDietInfo>
"""

NO_DATA_XML = """\
<?xml version="1.0" encoding="UTF-8"?>
<RESULT>
<CODE>INFO-200</CODE>
<MESSAGE>해당하는 데이터가 없습니다.</MESSAGE>
</RESULT>
"""


@pytest.fixture
def query():
    return MealQuery(school_code="7530079", office_code="J10", date="20240315")


@pytest.fixture
def sample_document():
    return parse_document(SAMPLE_XML.encode("utf-8"))


@pytest.fixture
def empty_document():
    return parse_document(NO_DATA_XML.encode("utf-8"))


@pytest.fixture
def sample_xml():
    return SAMPLE_XML.encode("utf-8")


@pytest.fixture
def no_data_xml():
    return NO_DATA_XML.encode("utf-8")
